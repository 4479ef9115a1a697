"""Tests for the interactive conflict resolver."""

from pathlib import Path

from treecraft.prompts import PromptConflictResolver
from treecraft_core.generator import ConflictDecision


def _scripted(*answers):
    questions = []
    replies = iter(answers)

    def ask(question):
        questions.append(question)
        return next(replies)

    return ask, questions


def test_single_answers():
    ask, questions = _scripted("o", "s")
    resolver = PromptConflictResolver(ask=ask)
    assert resolver(Path("a")) is ConflictDecision.OVERWRITE
    assert resolver(Path("b")) is ConflictDecision.SKIP
    assert len(questions) == 2
    assert '"a" already exists' in questions[0]


def test_all_skip_is_remembered():
    ask, questions = _scripted("a")
    resolver = PromptConflictResolver(ask=ask)
    assert resolver(Path("a")) is ConflictDecision.SKIP
    assert resolver(Path("b")) is ConflictDecision.SKIP
    assert len(questions) == 1


def test_all_overwrite_is_remembered():
    ask, questions = _scripted("B")
    resolver = PromptConflictResolver(ask=ask)
    assert resolver(Path("a")) is ConflictDecision.OVERWRITE
    assert resolver(Path("b")) is ConflictDecision.OVERWRITE
    assert len(questions) == 1


def test_unknown_answer_skips():
    ask, _ = _scripted("maybe", "")
    resolver = PromptConflictResolver(ask=ask)
    assert resolver(Path("a")) is ConflictDecision.SKIP
    assert resolver(Path("b")) is ConflictDecision.SKIP


def test_full_words_accepted():
    ask, _ = _scripted("overwrite")
    assert PromptConflictResolver(ask=ask)(Path("a")) is ConflictDecision.OVERWRITE
