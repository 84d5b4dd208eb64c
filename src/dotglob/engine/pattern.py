"""Parsed glob notations."""
from __future__ import annotations

import re
from functools import cached_property, lru_cache

from .errors import InvalidPatternError
from .models import Note
from .tokens import is_valid_glob, split_notes
from .utils import join_notes, strip_trailing_wildcards


class Pattern:
    """A validated, immutable glob notation such as ``!billing.*.id``.

    A star ``*`` stands for any single object key and ``[*]`` for any single
    array index; a leading ``!`` negates the glob. Trailing wildcards of a
    non-negated glob are redundant and removed (``x.*`` means ``x``), while a
    negated glob keeps them (``!x.*`` excludes the children of ``x`` but not
    ``x`` itself).

    Examples:
        >>> p = Pattern.parse("billing.account.*")
        >>> p.glob
        'billing.account'
        >>> p.test("billing.account.id")
        True
    """

    def __init__(self, glob: str) -> None:
        if not isinstance(glob, str):
            raise InvalidPatternError(glob)
        text = glob.strip()
        notes = split_notes(text)
        is_negated = text.startswith("!")
        if not is_negated:
            notes = strip_trailing_wildcards(notes)
        self._raw = glob
        self._is_negated = is_negated
        self._notes: tuple[Note, ...] = tuple(notes)
        self._abs_glob = join_notes(notes)

    @staticmethod
    def parse(glob: str) -> Pattern:
        """Return the (cached) :class:`Pattern` for ``glob``."""
        if not isinstance(glob, str):
            raise InvalidPatternError(glob)
        return _parse(glob)

    create = parse

    @staticmethod
    def is_valid(glob: object) -> bool:
        """Whether ``glob`` is valid exactly as given.

        Unlike :meth:`parse`, surrounding whitespace is not trimmed first, so
        ``Pattern.is_valid(" x ")`` is False while ``Pattern.parse(" x ")``
        succeeds.
        """
        return is_valid_glob(glob)

    @staticmethod
    def has_magic(glob: object) -> bool:
        """Whether ``glob`` says more than an exact path: negated or wildcarded.

        Redundant trailing wildcards don't count, so ``x.*`` has no magic.
        """
        if not is_valid_glob(glob):
            return False
        pattern = _parse(glob)
        return pattern.is_negated or any(note.is_wildcard for note in pattern.notes)

    @staticmethod
    def split(glob: str, normalize: bool = False) -> list[Note]:
        return split_notes(glob, normalize=normalize)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def glob(self) -> str:
        """Normalized glob, including the ``!`` prefix when negated."""
        return "!" + self._abs_glob if self._is_negated else self._abs_glob

    @property
    def abs_glob(self) -> str:
        """Glob without negation prefix and redundant trailing wildcards."""
        return self._abs_glob

    canonical = abs_glob

    @property
    def is_negated(self) -> bool:
        return self._is_negated

    @property
    def notes(self) -> tuple[Note, ...]:
        return self._notes

    @property
    def first(self) -> Note:
        return self._notes[0]

    @property
    def last(self) -> Note:
        return self._notes[-1]

    @property
    def is_array_glob(self) -> bool:
        # [*] and [1] are array globs; ["1"] is not
        return self.first.is_array

    @property
    def wildcard_count(self) -> int:
        return sum(1 for note in self._notes if note.is_wildcard)

    @cached_property
    def parent(self) -> str | None:
        """Canonical glob up to but excluding the last note.

        >>> Pattern.parse("*.x.*").parent  # normalized to "*.x"
        '*'
        """
        if len(self._notes) < 2:
            return None
        return join_notes(self._notes[:-1])

    @cached_property
    def regexp(self) -> re.Pattern[str]:
        from .matcher import notes_to_regexp

        return notes_to_regexp(self._notes)

    def test(self, notation: str) -> bool:
        from .matcher import test

        return test(self, notation)

    def covers(self, other: Pattern | str) -> bool:
        from .matcher import covers

        return covers(self, other)

    def intersect(self, other: Pattern | str, restrictive: bool = False) -> str | None:
        from .intersection import intersect

        return intersect(self, other, restrictive)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.glob == other.glob

    def __hash__(self) -> int:
        return hash(self.glob)

    def __str__(self) -> str:
        return self.glob

    def __repr__(self) -> str:
        return f"Pattern({self.glob!r})"


@lru_cache(maxsize=4096)
def _parse(glob: str) -> Pattern:
    return Pattern(glob)


def ensure_pattern(glob: Pattern | str) -> Pattern:
    if isinstance(glob, Pattern):
        return glob
    return Pattern.parse(glob)
