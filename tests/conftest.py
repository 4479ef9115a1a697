"""Shared test fixtures for TreeCraft."""

import pytest

from treecraft_core.config.models import TreeCraftConfig
from treecraft_core.tree.models import NodeMetadata, TreeNode


@pytest.fixture
def sample_tree():
    """src/{lib/utils.js, index.js}, package.json, README.md."""
    return TreeNode.directory(
        {
            "src": TreeNode.directory(
                {
                    "lib": TreeNode.directory({"utils.js": TreeNode.file()}),
                    "index.js": TreeNode.file("console.log('hello')"),
                }
            ),
            "package.json": TreeNode.file(),
            "README.md": TreeNode.file("# Demo"),
        }
    )


@pytest.fixture
def annotated_tree():
    """Tree with metadata on every node: one small, one medium and one large file."""
    mtime = "2024-01-31T10:00:00.000Z"
    return TreeNode.directory(
        {
            "docs": TreeNode.directory(
                {"guide.md": TreeNode.file(metadata=NodeMetadata(2048, mtime))},
                metadata=NodeMetadata(4096, mtime),
            ),
            "a.txt": TreeNode.file(metadata=NodeMetadata(500, mtime)),
            "big.bin": TreeNode.file(metadata=NodeMetadata(2 * 1024 * 1024, mtime)),
        }
    )


@pytest.fixture
def make_project(tmp_path):
    """Create files under tmp_path from {relative_path: content}; returns the root."""

    def _make(files: dict[str, str]):
        for rel, content in files.items():
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return tmp_path

    return _make


@pytest.fixture
def sample_config():
    return TreeCraftConfig()
