"""Tree model, filesystem builder and the algorithms that run over it."""

from treecraft_core.tree.builder import build_tree, gitignore_patterns
from treecraft_core.tree.filters import filter_tree
from treecraft_core.tree.models import NodeKind, NodeMetadata, TreeNode
from treecraft_core.tree.patterns import is_excluded, matches, parse_patterns
from treecraft_core.tree.search import search_tree
from treecraft_core.tree.stats import (
    Stats,
    compute_stats,
    count_dirs,
    count_files,
    total_size,
)

__all__ = [
    "NodeKind",
    "NodeMetadata",
    "Stats",
    "TreeNode",
    "build_tree",
    "compute_stats",
    "count_dirs",
    "count_files",
    "filter_tree",
    "gitignore_patterns",
    "is_excluded",
    "matches",
    "parse_patterns",
    "search_tree",
    "total_size",
]
