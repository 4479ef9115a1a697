"""Build a TreeNode by walking a directory on disk."""

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from treecraft_core.errors import TreeIOError
from treecraft_core.options import BuildOptions, validate_directory
from treecraft_core.tree.filters import filter_tree
from treecraft_core.tree.models import NodeMetadata, TreeNode
from treecraft_core.tree.patterns import is_excluded

logger = logging.getLogger(__name__)


def format_mtime(timestamp: float) -> str:
    """Render a stat mtime as ``2024-01-31T10:00:00.000Z``."""
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_tree(root: str | os.PathLike[str], options: BuildOptions | None = None) -> TreeNode:
    """Walk *root* and return its contents as a directory node.

    Entries whose name equals or ends with an exclude pattern are skipped
    without being descended into. Filter patterns are applied afterwards to
    the complete tree, so directories that get filtered out are still walked.

    Any filesystem failure aborts the whole build with ``TreeIOError``.
    """
    options = options or BuildOptions()
    root_path = validate_directory(root)
    tree = TreeNode.directory(_walk(root_path, options.depth, options))
    if options.filter:
        tree = filter_tree(tree, options.filter)
    logger.debug(
        "built tree for %s: %d entries (depth=%s, metadata=%s)",
        root_path,
        tree.descendant_count(),
        "unbounded" if options.depth is None else options.depth,
        options.with_metadata,
    )
    return tree


def _walk(directory: Path, depth: int | None, options: BuildOptions) -> dict[str, TreeNode]:
    children: dict[str, TreeNode] = {}
    if depth is not None and depth <= 0:
        return children

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise TreeIOError(f"Cannot read directory '{directory}': {e}", e) from e

    next_depth = None if depth is None else depth - 1
    for entry in entries:
        name = entry.name
        if is_excluded(name, options.exclude):
            logger.debug("excluded %s", entry)
            continue

        try:
            st = entry.stat()
        except OSError as e:
            raise TreeIOError(f"Cannot stat '{entry}': {e}", e) from e

        metadata = None
        if options.with_metadata:
            metadata = NodeMetadata(size=st.st_size, mtime=format_mtime(st.st_mtime))

        if stat.S_ISDIR(st.st_mode):
            children[name] = TreeNode.directory(
                _walk(entry, next_depth, options), metadata=metadata
            )
        else:
            children[name] = TreeNode.file(metadata=metadata)
    return children


def gitignore_patterns(root: str | os.PathLike[str]) -> list[str]:
    """Read ``<root>/.gitignore`` as name-level exclude patterns.

    Only the simple cases translate: ``build/`` and ``/dist`` become
    ``build`` and ``dist``, ``*.log`` becomes the suffix ``.log``. Comments,
    negations and patterns with inner slashes or wildcards are dropped.
    """
    path = Path(root) / ".gitignore"
    if not path.is_file():
        return []
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TreeIOError(f"Cannot read '{path}': {e}", e) from e

    patterns: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(("#", "!")):
            continue
        line = line.strip("/")
        if line.startswith("*"):
            line = line[1:]
        if not line or "/" in line or any(c in line for c in "*?["):
            continue
        patterns.append(line)
    return patterns
