"""Structure specs: the text-tree grammar plus JSON and YAML documents."""

from treecraft_core.spec.loader import (
    from_plain,
    load_spec_file,
    parse_json_tree,
    parse_yaml_tree,
)
from treecraft_core.spec.parser import parse_text_tree

__all__ = [
    "from_plain",
    "load_spec_file",
    "parse_json_tree",
    "parse_text_tree",
    "parse_yaml_tree",
]
