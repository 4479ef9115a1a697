"""TreeCraft Core - directory tree building, parsing, analysis and generation."""

from treecraft_core.config import TreeCraftConfig, load_config
from treecraft_core.errors import (
    CommandError,
    ConfigError,
    ConflictError,
    ParseError,
    TreeCraftError,
    TreeIOError,
    ValidationError,
)
from treecraft_core.generator import ConflictDecision, StructureGenerator, generate_structure
from treecraft_core.options import BuildOptions
from treecraft_core.spec import load_spec_file, parse_text_tree
from treecraft_core.tree import (
    Stats,
    TreeNode,
    build_tree,
    compute_stats,
    filter_tree,
    search_tree,
)

__version__ = "0.1.0"

__all__ = [
    "BuildOptions",
    "CommandError",
    "ConfigError",
    "ConflictDecision",
    "ConflictError",
    "ParseError",
    "Stats",
    "StructureGenerator",
    "TreeCraftConfig",
    "TreeCraftError",
    "TreeIOError",
    "TreeNode",
    "ValidationError",
    "build_tree",
    "compute_stats",
    "filter_tree",
    "generate_structure",
    "load_config",
    "load_spec_file",
    "parse_text_tree",
    "search_tree",
]
