"""Interactive conflict resolution for `treecraft gen --interactive`."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from rich.prompt import Prompt

from treecraft_core.generator import ConflictDecision

_ANSWERS: dict[str, tuple[ConflictDecision, bool]] = {
    "s": (ConflictDecision.SKIP, False),
    "o": (ConflictDecision.OVERWRITE, False),
    "a": (ConflictDecision.SKIP, True),
    "b": (ConflictDecision.OVERWRITE, True),
}


def _ask(question: str) -> str:
    return Prompt.ask(f"[yellow]{question}[/yellow]", default="s")


class PromptConflictResolver:
    """Asks what to do with each existing path.

    The "all" answers are remembered and applied to every later conflict
    without asking again. Unrecognised answers skip.
    """

    def __init__(self, ask: Callable[[str], str] = _ask) -> None:
        self._ask = ask
        self._sticky: ConflictDecision | None = None

    def __call__(self, path: Path) -> ConflictDecision:
        if self._sticky is not None:
            return self._sticky
        answer = self._ask(
            f'"{path}" already exists. '
            "Choose (s)kip, (o)verwrite, (a)ll skip, (b) all overwrite"
        )
        decision, sticky = _ANSWERS.get(answer.strip().lower()[:1], (ConflictDecision.SKIP, False))
        if sticky:
            self._sticky = decision
        return decision
