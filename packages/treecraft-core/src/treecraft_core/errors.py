"""Error taxonomy shared by every TreeCraft component."""

from __future__ import annotations

from pathlib import Path


class TreeCraftError(Exception):
    """Base class for errors raised by the core.

    ``kind`` is the user-facing label the CLI prints before the message.
    """

    kind: str = "UnexpectedError"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class ValidationError(TreeCraftError):
    """Invalid user-supplied option or argument."""

    kind = "ValidationError"


class ConfigError(ValidationError):
    """Config file is not valid YAML or does not match the config schema."""


class TreeIOError(TreeCraftError):
    """A filesystem operation (list, stat, read, write) failed."""

    kind = "IOError"


class ParseError(TreeCraftError):
    """Spec file content does not conform to JSON, YAML or the text-tree grammar."""

    kind = "ParseError"


class CommandError(TreeCraftError):
    """A command could not complete."""

    kind = "CommandError"


class ConflictError(CommandError):
    """Generation target already exists and no conflict policy was supplied."""

    def __init__(self, path: Path) -> None:
        self.path = path
        kind = "Directory" if path.is_dir() else "File"
        super().__init__(
            f"{kind} '{path}' already exists. Use --skip-all or --overwrite-all."
        )
