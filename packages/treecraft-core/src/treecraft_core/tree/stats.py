"""Aggregate statistics over a tree."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from treecraft_core.tree.models import TreeNode

KB = 1024
MB = 1024 * 1024

SIZE_BUCKETS: tuple[str, ...] = ("<1KB", "1KB-1MB", ">1MB")
NO_EXTENSION = "no-ext"


class Stats(BaseModel):
    """Counts and size breakdowns for a tree.

    Serialized with camelCase keys (``totalSize``, ``sizeDist``, ``fileTypes``).
    """

    model_config = ConfigDict(populate_by_name=True)

    files: int = 0
    dirs: int = 0
    total_size: int = Field(default=0, alias="totalSize")
    size_dist: dict[str, int] | None = Field(default=None, alias="sizeDist")
    file_types: dict[str, int] | None = Field(default=None, alias="fileTypes")

    def to_plain(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def size_bucket(size: int) -> str:
    """Bucket for *size*: [0, 1KB), [1KB, 1MB), [1MB, inf)."""
    if size < KB:
        return "<1KB"
    if size < MB:
        return "1KB-1MB"
    return ">1MB"


def extension_of(name: str) -> str:
    """Extension including the dot, or ``no-ext``. ``.bashrc`` has none."""
    return os.path.splitext(name)[1] or NO_EXTENSION


def count_files(tree: TreeNode) -> int:
    if tree.is_file:
        return 1
    return sum(count_files(child) for child in tree.children.values())


def count_dirs(tree: TreeNode) -> int:
    """Directories below *tree*, not counting *tree* itself."""
    return sum(1 + count_dirs(child) for child in tree.children.values() if child.is_dir)


def total_size(tree: TreeNode) -> int:
    """Sum of recorded file sizes; files without metadata contribute 0."""
    if tree.is_file:
        return tree.size
    return sum(total_size(child) for child in tree.children.values())


def compute_stats(
    tree: TreeNode, *, size_dist: bool = False, file_types: bool = False
) -> Stats:
    """Collect file/dir counts, total size and the optional breakdowns in one pass.

    Works with or without metadata: directories are recognised structurally,
    and only files carrying metadata land in a size bucket.
    """
    stats = Stats(
        size_dist=dict.fromkeys(SIZE_BUCKETS, 0) if size_dist else None,
        file_types={} if file_types else None,
    )

    for segments, node in tree.walk():
        if node.is_dir:
            stats.dirs += 1
            continue
        stats.files += 1
        stats.total_size += node.size
        if stats.size_dist is not None and node.metadata is not None:
            stats.size_dist[size_bucket(node.size)] += 1
        if stats.file_types is not None:
            ext = extension_of(segments[-1])
            stats.file_types[ext] = stats.file_types.get(ext, 0) + 1
    return stats
