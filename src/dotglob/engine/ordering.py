"""Specificity ordering of globs."""
from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .matcher import matches
from .models import NoteKind
from .pattern import Pattern, ensure_pattern
from .utils import ensure_list

_BARE_WILDCARDS = ("*", "[*]")


def _compare_array_items(a: Pattern, b: Pattern) -> int:
    """Order two negated globs addressing items of the same array.

    When items are removed from an array, the greater index has to go first
    so the indexes of the remaining ones don't shift. ``[*]`` comes last.
    e.g. ``![*][2] ![0][*] ![0][1] ![0][3]`` sorts as
    ``![0][3] ![*][2] ![0][1] ![0][*]``. Returns 0 when not applicable.
    """
    if (
        not a.is_negated
        or not b.is_negated
        or len(a.notes) != len(b.notes)
        or not a.last.is_array
        or not b.last.is_array
        or a.last == b.last
    ):
        return 0
    if a.last.kind is NoteKind.ARRAY_WILDCARD:
        return 1
    if b.last.kind is NoteKind.ARRAY_WILDCARD:
        return -1
    if a.parent and b.parent and not matches(a.parent, b.parent):
        return 0
    return -1 if a.last.value > b.last.value else 1


def compare(a: Pattern | str, b: Pattern | str) -> int:
    """Compare two globs by specificity; broad globs sort first.

    Shallower globs come before deeper ones. At the same depth, globs with
    more wildcards come first and a negated glob comes after its positive
    counterpart, so applying a sorted list rule by rule lets the specific
    rules override the broad ones.

    Examples:
        >>> compare("*", "info.user")
        -1
        >>> compare("*", "[*]")
        0
        >>> compare("info.*.name", "info.user")
        1
    """
    glob_a = a.glob if isinstance(a, Pattern) else a
    glob_b = b.glob if isinstance(b, Pattern) else b
    if glob_a == glob_b or (glob_a in _BARE_WILDCARDS and glob_b in _BARE_WILDCARDS):
        return 0

    pa = ensure_pattern(a)
    pb = ensure_pattern(b)
    if len(pa.notes) != len(pb.notes):
        return -1 if len(pa.notes) < len(pb.notes) else 1

    by_index = _compare_array_items(pa, pb)
    if by_index:
        return by_index

    if pa.wildcard_count != pb.wildcard_count:
        return -1 if pa.wildcard_count > pb.wildcard_count else 1
    if pa.is_negated != pb.is_negated:
        return 1 if pa.is_negated else -1
    if pa.abs_glob == pb.abs_glob:
        return 0
    return -1 if pa.abs_glob < pb.abs_glob else 1


def sort(globs: Iterable[str] | str | None) -> list[str]:
    """Return a new list of ``globs`` ordered by :func:`compare`.

    >>> sort(["!prop.*.name", "prop.*", "prop.id"])
    ['prop.*', 'prop.id', '!prop.*.name']
    """
    return sorted(ensure_list(globs), key=cmp_to_key(compare))
