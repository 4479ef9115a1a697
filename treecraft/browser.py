"""Interactive tree browser for `treecraft viz --mode interactive`."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.tree import Tree

from treecraft_core.output import format_size
from treecraft_core.tree import TreeNode, count_files

_QUIT = {"q", "quit", "exit"}
_UP = {"..", "b", "back"}


class TreeBrowser:
    """Prompt-driven navigation over an already built tree.

    State is the stack of directory names from the root plus a running
    flag. ``handle`` applies one command and returns a message to show,
    ``run`` drives it from the terminal.
    """

    def __init__(self, tree: TreeNode, root_label: str = ".") -> None:
        self.tree = tree
        self.root_label = root_label
        self.path: list[str] = []
        self.running = True

    @property
    def current(self) -> TreeNode:
        node = self.tree
        for name in self.path:
            node = node.children[name]
        return node

    @property
    def location(self) -> str:
        return "/".join([self.root_label, *self.path])

    def entries(self) -> list[tuple[str, TreeNode]]:
        """Current directory's entries, directories first, then by name."""
        return sorted(
            self.current.children.items(), key=lambda item: (not item[1].is_dir, item[0])
        )

    def handle(self, command: str) -> str | None:
        cmd = command.strip().lower()
        if cmd in _QUIT:
            self.running = False
            return None
        if cmd in _UP:
            if not self.path:
                return "Already at the top."
            self.path.pop()
            return None
        if cmd.isdigit():
            entries = self.entries()
            index = int(cmd) - 1
            if not 0 <= index < len(entries):
                return f"No entry {cmd}."
            name, node = entries[index]
            if node.is_dir:
                self.path.append(name)
                return None
            return self._describe_file(name, node)
        return f"Unknown command '{command.strip()}'. Use a number, '..' or 'q'."

    def _describe_file(self, name: str, node: TreeNode) -> str:
        if node.metadata is None:
            return f"{name} (file)"
        return f"{name} (file, {format_size(node.metadata.size)}, modified {node.metadata.mtime})"

    def render(self) -> Tree:
        view = Tree(f"[bold]{escape(self.location)}[/bold]")
        for i, (name, node) in enumerate(self.entries(), start=1):
            if node.is_dir:
                view.add(f"[cyan]{i}. {escape(name)}/[/cyan] [dim]({count_files(node)} files)[/dim]")
            else:
                view.add(f"[green]{i}. {escape(name)}[/green]")
        return view

    def run(self, console: Console | None = None) -> None:
        console = console or Console()
        while self.running:
            console.print(self.render())
            try:
                answer = Prompt.ask("[dim]number, '..' to go up, 'q' to quit[/dim]", console=console)
            except (EOFError, KeyboardInterrupt):
                break
            message = self.handle(answer)
            if message:
                console.print(f"[yellow]{message}[/yellow]")
