"""Tests for the interactive tree browser state machine."""

from io import StringIO
from unittest.mock import patch

from rich.console import Console

from treecraft.browser import TreeBrowser
from treecraft_core.tree.models import NodeMetadata, TreeNode


def test_entries_directories_first(sample_tree):
    browser = TreeBrowser(sample_tree)
    assert [name for name, _ in browser.entries()] == ["src", "README.md", "package.json"]


def test_enter_and_leave_directory(sample_tree):
    browser = TreeBrowser(sample_tree, root_label="proj")
    assert browser.handle("1") is None
    assert browser.path == ["src"]
    assert browser.location == "proj/src"
    assert browser.handle("1") is None
    assert browser.location == "proj/src/lib"
    assert browser.handle("..") is None
    assert browser.handle("back") is None
    assert browser.path == []


def test_up_at_root(sample_tree):
    assert TreeBrowser(sample_tree).handle("..") == "Already at the top."


def test_selecting_file_describes_it(sample_tree):
    browser = TreeBrowser(sample_tree)
    assert browser.handle("2") == "README.md (file)"
    assert browser.path == []


def test_file_with_metadata():
    tree = TreeNode.directory(
        {"a.txt": TreeNode.file(metadata=NodeMetadata(1536, "2024-01-31T10:00:00.000Z"))}
    )
    message = TreeBrowser(tree).handle("1")
    assert message == "a.txt (file, 1.5KB, modified 2024-01-31T10:00:00.000Z)"


def test_out_of_range(sample_tree):
    assert TreeBrowser(sample_tree).handle("9") == "No entry 9."
    assert TreeBrowser(sample_tree).handle("0") == "No entry 0."


def test_unknown_command(sample_tree):
    assert TreeBrowser(sample_tree).handle("ls").startswith("Unknown command 'ls'")


def test_quit(sample_tree):
    browser = TreeBrowser(sample_tree)
    browser.handle("q")
    assert browser.running is False


def test_render_lists_entries(sample_tree):
    console = Console(file=StringIO(), width=80)
    console.print(TreeBrowser(sample_tree).render())
    out = console.file.getvalue()
    assert "1. src/" in out
    assert "(2 files)" in out
    assert "3. package.json" in out


def test_run_until_quit(sample_tree):
    console = Console(file=StringIO(), width=80)
    browser = TreeBrowser(sample_tree)
    with patch("treecraft.browser.Prompt.ask", side_effect=["1", "x", "q"]):
        browser.run(console)
    assert browser.running is False
    assert browser.path == ["src"]
    assert "Unknown command 'x'" in console.file.getvalue()


def test_run_stops_on_eof(sample_tree):
    console = Console(file=StringIO(), width=80)
    with patch("treecraft.browser.Prompt.ask", side_effect=EOFError):
        TreeBrowser(sample_tree).run(console)
