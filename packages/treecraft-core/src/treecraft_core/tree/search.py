"""Filename search over a tree."""

from __future__ import annotations

import os

from treecraft_core.errors import ValidationError
from treecraft_core.tree.models import TreeNode


def normalize_extension(ext: str | None) -> str | None:
    if not ext:
        return None
    ext = ext.strip()
    return ext if ext.startswith(".") else f".{ext}"


def search_tree(
    tree: TreeNode,
    query: str,
    *,
    ext: str | None = None,
    base_path: str = "",
) -> list[str]:
    """Return paths of files whose name contains *query* (case-insensitive).

    Only files are tested; a directory whose name matches contributes
    nothing by itself. With *ext*, the file extension must also match
    exactly. Paths are *base_path* joined with the segments below the root.
    """
    if not query or not query.strip():
        raise ValidationError("Search query must not be empty")
    needle = query.lower()
    wanted_ext = normalize_extension(ext)

    results: list[str] = []
    for segments, node in tree.walk():
        if not node.is_file:
            continue
        name = segments[-1]
        if wanted_ext is not None and os.path.splitext(name)[1] != wanted_ext:
            continue
        if needle in name.lower():
            results.append(os.path.join(base_path, *segments))
    return results
