"""Option records and validators shared by the commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from treecraft_core.errors import ValidationError

ExportFormat = Literal["text", "json", "yaml"]
TreeMode = Literal["tree", "graph", "list", "interactive"]
SortKey = Literal["size", "count"]

EXPORT_FORMATS: tuple[str, ...] = ("text", "json", "yaml")
TREE_MODES: tuple[str, ...] = ("tree", "graph", "list", "interactive")
SORT_KEYS: tuple[str, ...] = ("size", "count")


class BuildOptions(BaseModel):
    """How to walk a directory into a tree."""

    depth: int | None = Field(default=None, description="None means unbounded, <= 0 lists nothing")
    exclude: list[str] = Field(default_factory=list)
    filter: list[str] = Field(default_factory=list)
    with_metadata: bool = False

    @field_validator("exclude", "filter")
    @classmethod
    def drop_empty_patterns(cls, v: list[str]) -> list[str]:
        # An empty pattern would match (or exclude) every name.
        return [p.strip() for p in v if p.strip()]


def validate_export_format(fmt: str | None) -> ExportFormat:
    if fmt is None:
        return "text"
    if fmt not in EXPORT_FORMATS:
        raise ValidationError(
            f"Invalid export format: '{fmt}'. Use 'text', 'json', or 'yaml'."
        )
    return fmt  # type: ignore[return-value]


def validate_tree_mode(mode: str | None) -> TreeMode:
    if mode is None:
        return "tree"
    if mode not in TREE_MODES:
        raise ValidationError(
            f"Invalid mode: '{mode}'. Valid modes are: {', '.join(TREE_MODES)}"
        )
    return mode  # type: ignore[return-value]


def validate_sort_option(sort: str | None) -> SortKey:
    if sort is None:
        return "count"
    if sort not in SORT_KEYS:
        raise ValidationError(f"Invalid sort option: '{sort}'. Use 'size' or 'count'.")
    return sort  # type: ignore[return-value]


def validate_directory(path: str | os.PathLike[str]) -> Path:
    """Return *path* as a Path, or raise ValidationError if it is not a directory."""
    p = Path(path)
    if not p.exists():
        raise ValidationError(f"'{p}' does not exist")
    if not p.is_dir():
        raise ValidationError(f"'{p}' is not a directory")
    return p
