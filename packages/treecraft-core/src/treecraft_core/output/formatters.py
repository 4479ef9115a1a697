"""Render trees, stats and search results as text, JSON or YAML."""

from __future__ import annotations

import json
from typing import Any

import yaml

from treecraft_core.options import (
    ExportFormat,
    SortKey,
    validate_export_format,
    validate_sort_option,
)
from treecraft_core.tree.models import TreeNode
from treecraft_core.tree.stats import SIZE_BUCKETS, Stats

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "

GRAPH_NAME_LIMIT = 30


# ── Structured export ────────────────────────────────────────────────


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def to_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def _export(data: Any, export: ExportFormat) -> str:
    return to_json(data) if export == "json" else to_yaml(data)


# ── Sizes ────────────────────────────────────────────────────────────


def format_size(size: int) -> str:
    """Human-readable size: ``500B``, ``1.5KB``, ``1.9MB``, ``5.0GB``."""
    if size < 1024:
        return f"{size}B"
    if size < 1024**2:
        return f"{size / 1024:.1f}KB"
    if size < 1024**3:
        return f"{size / 1024**2:.1f}MB"
    return f"{size / 1024**3:.1f}GB"


# ── Tree ─────────────────────────────────────────────────────────────


def format_tree(
    tree: TreeNode,
    export: str | None = "text",
    with_metadata: bool = False,
    with_content: bool = False,
) -> str:
    """Render *tree* as an ASCII tree, or export its plain form.

    With *with_content*, files carrying content print as ``name: content``,
    which is the form the text-tree parser reads back.
    """
    fmt = validate_export_format(export)
    if fmt != "text":
        return _export(tree.to_plain(), fmt)
    lines: list[str] = []
    _ascii_lines(tree, "", with_metadata, with_content, lines)
    return "".join(f"{line}\n" for line in lines)


def _ascii_lines(
    node: TreeNode, prefix: str, with_metadata: bool, with_content: bool, lines: list[str]
) -> None:
    names = list(node.children)
    for i, name in enumerate(names):
        child = node.children[name]
        is_last = i == len(names) - 1
        line = f"{prefix}{LAST_BRANCH if is_last else BRANCH}{name}"
        if with_content and child.content is not None:
            line += f": {child.content}"
        if with_metadata and child.metadata is not None:
            kind = "D" if child.is_dir else "F"
            date = child.metadata.mtime[:10]
            line += f" ({kind}, {format_size(child.metadata.size)}, {date})"
        lines.append(line)
        if child.is_dir:
            _ascii_lines(
                child, prefix + (SPACE if is_last else PIPE), with_metadata, with_content, lines
            )


def format_list(tree: TreeNode) -> str:
    """One ``/``-separated path per line, parents before their contents."""
    return "\n".join("/".join(segments) for segments, _ in tree.walk())


def _truncate(name: str, limit: int = GRAPH_NAME_LIMIT) -> str:
    if len(name) <= limit:
        return name
    return name[: limit - 3] + "..."


def format_graph(
    tree: TreeNode, root_label: str = ".", with_metadata: bool = False
) -> str:
    """Tree view weighted by size of subtree.

    Siblings are ordered by descendant count, largest first; ties keep
    their original order. Long names are truncated.
    """
    lines = [root_label]
    _graph_lines(tree, "", with_metadata, lines)
    return "\n".join(lines)


def _graph_lines(
    node: TreeNode, prefix: str, with_metadata: bool, lines: list[str]
) -> None:
    weighted = sorted(
        node.children.items(), key=lambda item: item[1].descendant_count(), reverse=True
    )
    for i, (name, child) in enumerate(weighted):
        is_last = i == len(weighted) - 1
        line = f"{prefix}{LAST_BRANCH if is_last else BRANCH}{_truncate(name)}"
        if with_metadata and child.metadata is not None:
            line += f" [{'D' if child.is_dir else 'F'}, {child.metadata.size}B]"
        lines.append(line)
        if child.is_dir:
            _graph_lines(child, prefix + (SPACE if is_last else PIPE), with_metadata, lines)


# ── Stats ────────────────────────────────────────────────────────────


def _table_row(label: str, count: int) -> str:
    return f"| {label:<10} | {count:<5} |"


def _ordered_buckets(size_dist: dict[str, int], sort: SortKey) -> list[tuple[str, int]]:
    if sort == "size":
        return [(b, size_dist.get(b, 0)) for b in reversed(SIZE_BUCKETS)]
    return sorted(size_dist.items(), key=lambda item: item[1], reverse=True)


def _ordered_types(file_types: dict[str, int], sort: SortKey) -> list[tuple[str, int]]:
    if sort == "size":
        return sorted(file_types.items())
    return sorted(file_types.items(), key=lambda item: item[1], reverse=True)


def format_stats(stats: Stats, export: str | None = "text", sort: str | None = "count") -> str:
    """Summary line plus optional size-distribution and file-type tables."""
    fmt = validate_export_format(export)
    key = validate_sort_option(sort)
    if fmt != "text":
        return _export(stats.to_plain(), fmt)

    sections = [
        f"Files: {stats.files}, Dirs: {stats.dirs}, Total Size: {format_size(stats.total_size)}"
    ]
    if stats.size_dist is not None:
        rows = [_table_row(label, n) for label, n in _ordered_buckets(stats.size_dist, key)]
        sections.append("\n".join(["Size Distribution:", *rows]))
    if stats.file_types is not None:
        rows = [_table_row(ext, n) for ext, n in _ordered_types(stats.file_types, key)]
        sections.append("\n".join(["File Types:", *rows]))
    return "\n\n".join(sections)


# ── Search ───────────────────────────────────────────────────────────


def format_search_results(results: list[str], export: str | None = "text") -> str:
    fmt = validate_export_format(export)
    if fmt != "text":
        return _export(list(results), fmt)
    if not results:
        return "No matches found."
    return "\n".join(["Search Results:", *results])
