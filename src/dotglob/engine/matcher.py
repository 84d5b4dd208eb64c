"""Coverage and matching primitives between globs and notations."""
from __future__ import annotations

import re
from collections.abc import Sequence

from .errors import InvalidNotationError
from .models import Note, NoteKind
from .pattern import Pattern, ensure_pattern
from .tokens import is_valid_glob, split_notes

_IDENT_SRC = r"[A-Za-z$_][A-Za-z$_0-9]*"
_QUOTED_SRC = r"""(?:'[^']*'|"[^"]*")"""


def covers_note(a: Note | None, b: Note | None) -> bool:
    """Whether note ``a`` represents (at least) everything note ``b`` does."""
    if a is None or b is None:
        # e.g. [2] does not cover [2][1]
        return False
    if a.kind is NoteKind.WILDCARD:
        return not b.is_array
    if a.kind is NoteKind.ARRAY_WILDCARD:
        return b.is_array
    if b.is_wildcard:
        return False
    # x.y and x['y'] are the same
    return a.is_array == b.is_array and a.key == b.key


def matches_note(a: Note | None, b: Note | None) -> bool:
    if a is None or b is None:
        # e.g. [2][1] matches [2] and vice versa
        return True
    return covers_note(a, b) or covers_note(b, a)


def _covers_notes(notes_a: Sequence[Note], notes_b: Sequence[Note], match: bool = False) -> bool:
    fn = matches_note if match else covers_note
    for index, note in enumerate(notes_a):
        other = notes_b[index] if index < len(notes_b) else None
        if not fn(note, other):
            return False
    return True


def covers(a: Pattern | str, b: Pattern | str) -> bool:
    """Whether glob ``a`` covers glob ``b``; the negation of ``b`` is ignored.

    Examples:
        >>> covers("*.y", "x.y")
        True
        >>> covers("x[*].y", "x[*]")
        False
        >>> covers("!x.*.*", "!x.*")  # a deeper negation excludes less
        False
    """
    pa = ensure_pattern(a)
    pb = ensure_pattern(b)
    # !x.*.* does not cover !x.* or x.*, but x.*.* covers x.* (both mean x)
    if pa.is_negated and len(pa.notes) > len(pb.notes):
        return False
    return _covers_notes(pa.notes, pb.notes)


def matches(a: Pattern | str, b: Pattern | str) -> bool:
    """Symmetric relaxation of :func:`covers`, note by note.

    >>> matches("[2][1]", "[2]")
    True
    """
    pa = ensure_pattern(a)
    pb = ensure_pattern(b)
    return _covers_notes(pa.notes, pb.notes, match=True)


def _concrete_notes(notation: str) -> list[Note]:
    if not is_valid_glob(notation) or notation.startswith("!"):
        raise InvalidNotationError(notation)
    notes = split_notes(notation)
    if any(note.is_wildcard for note in notes):
        raise InvalidNotationError(notation)
    return notes


def test(glob: Pattern | str, notation: str) -> bool:
    """Whether the concrete ``notation`` is matched by ``glob``.

    The negation of ``glob`` is ignored; callers decide what a match of a
    negated glob means.

    Examples:
        >>> test("!prop.*.name", "prop.account.name")
        True
    """
    pattern = ensure_pattern(glob)
    return _covers_notes(pattern.notes, _concrete_notes(notation))


test.__test__ = False  # keep pytest from collecting it when imported into test modules


def _key_fragment(key: str, dot: str) -> str:
    quoted = rf"""\[(?:'{re.escape(key)}'|"{re.escape(key)}")\]"""
    if re.fullmatch(_IDENT_SRC, key):
        return rf"(?:{dot}{re.escape(key)}|{quoted})"
    return quoted


def _note_fragment(note: Note, first: bool) -> str:
    dot = "" if first else r"\."
    if note.kind is NoteKind.WILDCARD:
        return rf"(?:{dot}{_IDENT_SRC}|\[{_QUOTED_SRC}\])"
    if note.kind is NoteKind.ARRAY_WILDCARD:
        return r"\[[0-9]+\]"
    if note.kind is NoteKind.INDEX:
        return rf"\[0*{note.value}\]"
    return _key_fragment(str(note.value), dot)


def notes_to_regexp(notes: Sequence[Note]) -> re.Pattern[str]:
    body = "".join(_note_fragment(note, index == 0) for index, note in enumerate(notes))
    # the matched notation either ends here or goes on with a dot or bracket,
    # so `company.*` matches `company.name.first` but not `company_x.name`
    return re.compile("^" + body + r"(?:[\[.].+)?$")


def to_regexp(glob: Pattern | str) -> re.Pattern[str]:
    """Regular expression matching concrete notations covered by ``glob``.

    The negation prefix is ignored.

    Examples:
        >>> bool(to_regexp("user.*").match("user['e-mail']"))
        True
    """
    return ensure_pattern(glob).regexp
