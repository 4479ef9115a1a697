"""Data model for directory trees."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class NodeMetadata:
    """Size and modification time captured from ``stat``."""

    size: int
    mtime: str  # ISO-8601, UTC, millisecond precision

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")


@dataclass(frozen=True)
class TreeNode:
    """A file or directory in a tree.

    Four shapes share this type, told apart by ``kind`` and ``metadata``:

    * directory: ``kind=DIRECTORY`` with a ``children`` mapping
    * empty file: ``kind=FILE``, no content
    * file with content: ``kind=FILE`` with ``content`` set
    * annotated node: either kind with ``metadata`` attached
    """

    kind: NodeKind
    children: Mapping[str, TreeNode] = field(default_factory=dict)
    content: str | None = None
    metadata: NodeMetadata | None = None

    def __post_init__(self) -> None:
        if self.kind is NodeKind.FILE and self.children:
            raise ValueError("file nodes cannot have children")
        if self.kind is NodeKind.DIRECTORY and self.content is not None:
            raise ValueError("directory nodes cannot have content")
        # Read-only view over a private copy.
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def directory(
        cls,
        children: Mapping[str, TreeNode] | None = None,
        metadata: NodeMetadata | None = None,
    ) -> TreeNode:
        return cls(NodeKind.DIRECTORY, children=children or {}, metadata=metadata)

    @classmethod
    def file(
        cls, content: str | None = None, metadata: NodeMetadata | None = None
    ) -> TreeNode:
        return cls(NodeKind.FILE, content=content, metadata=metadata)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def size(self) -> int:
        """Recorded size, 0 when no metadata was captured."""
        return self.metadata.size if self.metadata else 0

    def with_children(self, children: Mapping[str, TreeNode]) -> TreeNode:
        """Copy of this directory with its children replaced, metadata kept."""
        return TreeNode.directory(children, metadata=self.metadata)

    def walk(self, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], TreeNode]]:
        """Yield ``(path_segments, node)`` for every descendant, depth-first."""
        for name, child in self.children.items():
            segments = prefix + (name,)
            yield segments, child
            if child.is_dir:
                yield from child.walk(segments)

    def descendant_count(self) -> int:
        return sum(1 for _ in self.walk())

    # ------------------------------------------------------------------
    # Plain (JSON-shaped) form
    # ------------------------------------------------------------------

    def to_plain(self) -> Any:
        """Convert to the JSON-shaped form used for export.

        Directories become dicts, empty files ``None``, files with content
        their string. Annotated nodes become ``{"type", "size", "mtime"}``
        objects, with ``children`` for directories.
        """
        if self.metadata is not None:
            plain: dict[str, Any] = {
                "type": self.kind.value,
                "size": self.metadata.size,
                "mtime": self.metadata.mtime,
            }
            if self.is_dir:
                plain["children"] = _children_to_plain(self.children)
            elif self.content is not None:
                plain["content"] = self.content
            return plain
        if self.is_dir:
            return _children_to_plain(self.children)
        return self.content


def _children_to_plain(children: Mapping[str, TreeNode]) -> dict[str, Any]:
    return {name: child.to_plain() for name, child in children.items()}
