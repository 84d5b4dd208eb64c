"""Helpers shared by the glob algebra modules."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Note, Policy


def strip_trailing_wildcards(notes: Sequence[Note]) -> list[Note]:
    """Drop trailing wildcard notes, always keeping the first note.

    Only valid for non-negated globs: ``x.*`` includes everything that ``x``
    does, while ``!x.*`` keeps ``x`` itself.
    """
    result = list(notes)
    while len(result) > 1 and result[-1].is_wildcard:
        result.pop()
    return result


def join_notes(notes: Iterable[Note]) -> str:
    """Join notes back into a notation string.

    Examples:
        >>> join_notes(split_notes("a['b'][0].c"))
        "a['b'][0].c"
    """
    parts: list[str] = []
    for note in notes:
        if parts and not note.is_bracket:
            parts.append(".")
        parts.append(note.text)
    return "".join(parts)


def invert(glob: str) -> str:
    return glob[1:] if glob.startswith("!") else "!" + glob


def ensure_list(globs: str | Iterable[str] | None) -> list[str]:
    """Coerce a single glob or ``None`` into a list.

    Examples:
        >>> ensure_list("a.b")
        ['a.b']
        >>> ensure_list(None)
        []
    """
    if globs is None:
        return []
    if isinstance(globs, str):
        return [globs]
    return list(globs)


def resolve_restrictive(value: bool | Policy | str) -> bool:
    """Resolve a restrictive flag from a bool, a :class:`Policy` or its name.

    Examples:
        >>> resolve_restrictive(True)
        True
        >>> resolve_restrictive(Policy.LOOSE)
        False
        >>> resolve_restrictive("restrictive")
        True
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return Policy(value.lower()) is Policy.RESTRICTIVE
        except ValueError:
            raise ValueError(f"Invalid policy: {value!r}. Must be 'loose' or 'restrictive'") from None
    raise ValueError(f"Invalid policy: {value!r}. Must be 'loose' or 'restrictive'")
