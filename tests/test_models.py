"""Tests for data models and small helpers."""

import pytest

from dotglob import NoteKind, Policy, parse_note
from dotglob.engine.utils import ensure_list, invert, join_notes, resolve_restrictive


def test_note_equality_ignores_quote_style() -> None:
    assert parse_note("['x']") == parse_note('["x"]')
    assert parse_note("x") != parse_note("['x']")
    assert parse_note("x").key == parse_note("['x']").key == "x"
    assert parse_note("[1]").key == 1


def test_note_flags() -> None:
    assert parse_note("[*]").is_array and parse_note("[*]").is_wildcard
    assert parse_note("[3]").is_array and not parse_note("[3]").is_wildcard
    assert parse_note("*").is_wildcard and not parse_note("*").is_array
    assert not parse_note("['1']").is_array
    assert parse_note("['1']").kind is NoteKind.BRACKET_KEY


def test_note_bracket_flag() -> None:
    assert parse_note("['b']").is_bracket
    assert parse_note("[0]").is_bracket and parse_note("[*]").is_bracket
    assert not parse_note("b").is_bracket and not parse_note("*").is_bracket


def test_join_notes() -> None:
    notes = [parse_note(t) for t in ["a", "['b']", "[0]", "c", "*"]]
    assert join_notes(notes) == "a['b'][0].c.*"
    assert join_notes([parse_note("[*]"), parse_note("x")]) == "[*].x"


def test_invert_and_ensure_list() -> None:
    assert invert("a.b") == "!a.b"
    assert invert("!a.b") == "a.b"
    assert ensure_list("a") == ["a"]
    assert ensure_list(None) == []
    assert ensure_list(("a", "b")) == ["a", "b"]


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, True),
        (False, False),
        (Policy.LOOSE, False),
        (Policy.RESTRICTIVE, True),
        ("restrictive", True),
        ("LOOSE", False),
    ],
)
def test_resolve_restrictive(value: object, expected: bool) -> None:
    assert resolve_restrictive(value) is expected


@pytest.mark.parametrize("value", ["strict", 1, None])
def test_resolve_restrictive_rejects_unknown(value: object) -> None:
    with pytest.raises(ValueError):
        resolve_restrictive(value)
