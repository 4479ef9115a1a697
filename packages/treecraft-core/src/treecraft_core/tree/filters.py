"""Pattern filtering over a tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from treecraft_core.tree.models import TreeNode
from treecraft_core.tree.patterns import matches


def filter_tree(tree: TreeNode, patterns: Sequence[str]) -> TreeNode:
    """Keep only entries matching *patterns*, preserving the hierarchy.

    A file is kept when its name matches. A directory is kept when its own
    name matches or when anything below it survives filtering; its metadata
    is preserved and its children replaced by the filtered subtree.

    With no patterns the tree is returned as is.
    """
    if not patterns:
        return tree
    return tree.with_children(_filter_children(tree.children, patterns))


def _filter_children(
    children: Mapping[str, TreeNode], patterns: Sequence[str]
) -> dict[str, TreeNode]:
    filtered: dict[str, TreeNode] = {}
    for name, node in children.items():
        name_matches = matches(name, patterns)
        if node.is_file:
            if name_matches:
                filtered[name] = node
            continue
        subtree = _filter_children(node.children, patterns)
        if name_matches or subtree:
            filtered[name] = node.with_children(subtree)
    return filtered
