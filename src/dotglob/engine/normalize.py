"""Normalization of glob lists into their minimal, sorted form."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from .errors import IntegrityError
from .intersection import intersect
from .matcher import covers
from .models import Policy
from .ordering import sort
from .pattern import Pattern
from .utils import ensure_list, invert, resolve_restrictive

logger = logging.getLogger(__name__)

_NEGATE_ALL = ("!*", "![*]")


def _canonical(globs: Iterable[str]) -> frozenset[str]:
    return frozenset(Pattern.parse(glob).glob for glob in globs)


def _ordered(state: frozenset[str]) -> list[str]:
    # a fixed order per set, so a pass only depends on which globs are listed
    return sort(sorted(state))


def _working_order(patterns: Sequence[Pattern], restrictive: bool) -> list[Pattern]:
    # positives are decided against the others first in loose mode and last
    # in restrictive mode; negatives are ordered by length
    positives = [p for p in patterns if not p.is_negated]
    negatives = sorted((p for p in patterns if p.is_negated), key=lambda p: len(p.glob))
    return negatives + positives if restrictive else positives + negatives


def _keeps(
    a: Pattern,
    index: int,
    order: Sequence[Pattern],
    excluded: set[str],
    restrictive: bool,
    on_disjoint: Callable[[Pattern, Pattern], None],
) -> bool:
    covered_by_pos = False
    covered_by_neg = False
    neg_covers_pos = False

    for other_index in range(len(order) - 1, -1, -1):
        if other_index == index:
            continue
        b = order[other_index]
        if b.glob in excluded:
            continue

        covers_b = covers(a, b)
        covered_by_b = not covers_b and covers(b, a)
        if a.is_negated:
            if b.is_negated:
                if covered_by_b:
                    return False
            else:
                neg_covers_pos = neg_covers_pos or covers_b
                covered_by_pos = covered_by_pos or covered_by_b
                if not covers_b and not covered_by_b:
                    on_disjoint(a, b)
        elif b.is_negated:
            if covered_by_b:
                if restrictive:
                    return False
                covered_by_neg = True
            elif not covers_b:
                on_disjoint(b, a)
        elif covered_by_b:
            if restrictive:
                return False
            covered_by_pos = True

    if a.is_negated:
        return covered_by_pos or (restrictive and neg_covers_pos)
    # loose: a negation over a covered positive keeps it as a re-inclusion
    return covered_by_neg or not covered_by_pos


def _normalize_pass(globs: Sequence[str], restrictive: bool) -> tuple[list[str], list[str]]:
    """Run one reduction pass; return the kept globs and new intersections."""
    patterns = [Pattern.parse(glob) for glob in globs]
    if not patterns:
        return [], []
    if len({p.is_array_glob for p in patterns}) > 1:
        # e.g. ['x.y', '[1].x'] - the source cannot be both an object and an array
        raise IntegrityError(
            f"Integrity failed. Cannot have both object and array notations for root level: {list(globs)!r}"
        )
    if restrictive and any(p.glob in _NEGATE_ALL for p in patterns):
        return [], []

    listed = {p.glob for p in patterns}
    # ['*', 'a', '!a'] -> ['*', '!a']
    negated = {p.abs_glob for p in patterns if p.is_negated}
    patterns = [p for p in patterns if p.is_negated or p.abs_glob not in negated]
    if all(p.is_negated for p in patterns):
        # nothing left to exclude from
        return [], []

    # negated glob -> intersections that replace it if it is dropped
    pending: dict[str, list[str]] = {}

    def add_intersection(neg: Pattern, pos: Pattern) -> None:
        inter = intersect(neg.glob, pos.glob, restrictive)
        if inter is None or inter in listed:
            return
        if not restrictive and invert(inter) in listed:
            return
        pending.setdefault(neg.glob, []).append(inter)

    order = _working_order(patterns, restrictive)
    excluded: set[str] = set()
    kept: list[str] = []
    for index in range(len(order) - 1, -1, -1):
        a = order[index]
        if _keeps(a, index, order, excluded, restrictive, add_intersection):
            kept.append(a.glob)
        else:
            excluded.add(a.glob)

    intersections: dict[str, None] = {}
    for neg, inters in pending.items():
        if neg not in kept:
            intersections.update(dict.fromkeys(inters))
    return kept, list(intersections)


def normalize(globs: Iterable[str] | str | None, restrictive: bool | Policy | str = False) -> list[str]:
    """Reduce ``globs`` to the minimal sorted list with the same meaning.

    - Exact duplicates are removed: ``['car', 'dog', 'car']`` -> ``['car', 'dog']``.
    - A negated twin wins: ``['*', 'id', '!id']`` -> ``['*', '!id']``.
    - Covered globs are dropped: ``['car.*', 'car.model']`` -> ``['car']``.
    - A negation covered by a positive glob is kept:
      ``['*', 'car', '!car.model']`` -> ``['*', '!car.model']``.
    - A negation unrelated to every positive glob is replaced by its
      intersections: ``['car.*', '!*.model']`` -> ``['car', '!car.model']``.
    - In restrictive mode a negation removes every glob it covers:
      ``['*', 'car.model', '!car.*']`` -> ``['*', '!car.*']`` (loose mode
      keeps ``car.model``).

    Passes are repeated until one changes nothing, so the result is a fixed
    point and normalizing it again returns it unchanged.

    Raises:
        ParseError: if an item is not a valid glob.
        IntegrityError: if array and object notations are mixed at the root.
    """
    restrictive = resolve_restrictive(restrictive)
    state = _canonical(ensure_list(globs))
    history: list[frozenset[str]] = []
    while state not in history:
        history.append(state)
        kept, intersections = _normalize_pass(_ordered(state), restrictive)
        next_state = _canonical(kept + intersections)
        logger.debug(
            "normalize pass %d: %d candidates, %d kept, %d intersections",
            len(history), len(state), len(kept), len(intersections),
        )
        if next_state == state:
            return _ordered(state)
        state = next_state

    # passes went round in a cycle; settle on the same member from any entry
    cycle = history[history.index(state):]
    logger.debug("normalize cycled over %d candidate sets", len(cycle))
    return _ordered(min(cycle, key=lambda s: (len(s), sorted(s))))
