"""Formatters for trees, stats and search results."""

from treecraft_core.output.formatters import (
    format_graph,
    format_list,
    format_search_results,
    format_size,
    format_stats,
    format_tree,
    to_json,
    to_yaml,
)

__all__ = [
    "format_graph",
    "format_list",
    "format_search_results",
    "format_size",
    "format_stats",
    "format_tree",
    "to_json",
    "to_yaml",
]
