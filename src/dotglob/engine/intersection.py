"""Intersection of two globs."""
from __future__ import annotations

from .errors import InvalidPatternError
from .matcher import covers_note
from .models import Note, Policy
from .pattern import Pattern
from .tokens import split_notes
from .utils import join_notes, resolve_restrictive


def _as_written(glob: Pattern | str) -> str:
    if isinstance(glob, Pattern):
        return glob.raw.strip()
    if not isinstance(glob, str):
        raise InvalidPatternError(glob)
    return glob.strip()


def _same_note(a: Note, b: Note) -> bool:
    if a == b:
        return True
    return not a.is_wildcard and not b.is_wildcard and covers_note(a, b)


def _merge_note(a: Note | None, b: Note | None) -> Note | None:
    if a is None:
        return b
    if b is None:
        return a
    if _same_note(a, b):
        return a
    if a.is_wildcard and covers_note(a, b):
        return b
    if b.is_wildcard and covers_note(b, a):
        return a
    return None


def intersect(
    a: Pattern | str, b: Pattern | str, restrictive: bool | Policy | str = False
) -> str | None:
    """Most specific glob consistent with both ``a`` and ``b``, if any.

    Notes are compared as written, so ``x.*`` is two levels deep here.
    When restrictive, the result is negated if either glob is; otherwise only
    if both are, or if the deeper of the two is (a deeper negation keeps
    carving out of a shallower inclusion).

    Examples:
        >>> intersect("x.*", "!*.y")
        'x.y'
        >>> intersect("x.*", "!*.y", restrictive=True)
        '!x.y'
        >>> intersect("car", "!*.model")
        '!car.model'
        >>> intersect("x.y", "a.*") is None
        True
    """
    restrictive = resolve_restrictive(restrictive)
    glob_a = _as_written(a)
    glob_b = _as_written(b)
    notes_a = split_notes(glob_a)
    notes_b = split_notes(glob_b)
    neg_a = glob_a.startswith("!")
    neg_b = glob_b.startswith("!")

    if restrictive:
        negated = neg_a or neg_b
    else:
        negated = (
            (neg_a and neg_b)
            or (neg_a and len(notes_a) > len(notes_b))
            or (neg_b and len(notes_b) > len(notes_a))
        )

    #   x.*  ∩  *.y   »  x.y
    # x.*.z  ∩  *.y   »  x.y.z
    #   x.y  ∩  *.b   »  (none)
    merged: list[Note] = []
    for index in range(max(len(notes_a), len(notes_b))):
        note = _merge_note(
            notes_a[index] if index < len(notes_a) else None,
            notes_b[index] if index < len(notes_b) else None,
        )
        if note is None:
            return None
        merged.append(note)
    if not merged:
        return None
    return ("!" if negated else "") + join_notes(merged)
