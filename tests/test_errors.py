"""Tests for the error taxonomy."""

from pathlib import Path

import pytest

from treecraft_core.errors import (
    CommandError,
    ConfigError,
    ConflictError,
    ParseError,
    TreeCraftError,
    TreeIOError,
    ValidationError,
)


@pytest.mark.parametrize(
    "cls, kind",
    [
        (ValidationError, "ValidationError"),
        (ConfigError, "ValidationError"),
        (TreeIOError, "IOError"),
        (ParseError, "ParseError"),
        (CommandError, "CommandError"),
    ],
)
def test_kinds(cls, kind):
    err = cls("boom")
    assert isinstance(err, TreeCraftError)
    assert err.kind == kind
    assert str(err) == "boom"


def test_cause_is_chained():
    cause = OSError("disk")
    err = TreeIOError("cannot write", cause)
    assert err.__cause__ is cause


def test_conflict_error_names_file(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("x")
    err = ConflictError(target)
    assert str(err) == f"File '{target}' already exists. Use --skip-all or --overwrite-all."
    assert err.path == target


def test_conflict_error_names_directory(tmp_path):
    err = ConflictError(Path(tmp_path))
    assert str(err).startswith("Directory ")
