"""Union of two glob lists."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .intersection import intersect
from .matcher import covers
from .models import Policy
from .normalize import normalize
from .pattern import Pattern
from .utils import resolve_restrictive

logger = logging.getLogger(__name__)

_BARE_WILDCARDS = ("*", "[*]")


def _merge_into(
    source: Sequence[str], other: Sequence[str], restrictive: bool, merged: list[str]
) -> list[str]:
    """Add the globs of ``source`` that still matter next to ``other``."""
    result = list(merged)
    others = [Pattern.parse(glob) for glob in other]
    for glob in reversed(source):
        if glob in result:
            continue
        a = Pattern.parse(glob)
        if a.abs_glob in _BARE_WILDCARDS:
            result.append(a.glob)
            continue

        has_exact = False
        pos_covers = False
        neg_covers = False
        intersections: list[str] = []
        for b in reversed(others):
            if b.glob == a.glob:
                has_exact = True
                continue
            if not covers(b, a):
                if a.is_negated and b.is_negated:
                    inter = intersect(a.glob, b.glob, restrictive)
                    if inter and inter not in result and inter not in intersections:
                        intersections.append(inter)
                continue
            if b.is_negated:
                neg_covers = True
            else:
                pos_covers = True

        if has_exact or not pos_covers or neg_covers:
            result.append(a.glob)
        elif a.is_negated:
            # covered by a positive only; keep what both sides still exclude
            result.extend(inter for inter in intersections if inter not in result)
    return result


def union(
    globs_a: Iterable[str] | str | None,
    globs_b: Iterable[str] | str | None,
    restrictive: bool | Policy | str = False,
) -> list[str]:
    """Normalized union of two glob lists.

    - Duplicates collapse: ``['*', 'name'] ∪ ['email']`` -> ``['*']``.
    - A positive glob beats a negation it covers in the other list:
      ``['!user.id'] ∪ ['user.*']`` -> ``['user']``.

    Examples:
        >>> union(['user.*', '!user.email', 'car.model', '!*.id'],
        ...       ['!*.date', 'user.email', 'car', '*.age'])
        ['car', 'user', '*.age', '!car.date', '!user.id']
    """
    restrictive = resolve_restrictive(restrictive)
    list_a = normalize(globs_a, restrictive)
    list_b = normalize(globs_b, restrictive)
    if not list_a:
        return list_b
    if not list_b:
        return list_a

    merged = _merge_into(list_a, list_b, restrictive, [])
    merged = _merge_into(list_b, list_a, restrictive, merged)
    logger.debug("union merged %d + %d globs into %d candidates", len(list_a), len(list_b), len(merged))
    return normalize(merged, restrictive)
