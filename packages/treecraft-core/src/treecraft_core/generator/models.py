"""Models for structure generation."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, Field


class ConflictDecision(str, Enum):
    SKIP = "skip"
    OVERWRITE = "overwrite"


# Called with the existing path; returns what to do with it.
ConflictResolver = Callable[[Path], ConflictDecision]


class GenerationReport(BaseModel):
    """Paths touched by one generation run, in walk order."""

    created: list[str] = Field(default_factory=list)
    overwritten: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.created) + len(self.overwritten) + len(self.skipped)
