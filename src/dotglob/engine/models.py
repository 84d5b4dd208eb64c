"""Data models shared across the dotglob engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Policy(str, enum.Enum):
    """How negated globs interact with positive ones.

    LOOSE: a negation only removes paths that nothing else grants.
    RESTRICTIVE: a negation removes every path it covers.
    """
    LOOSE = "loose"
    RESTRICTIVE = "restrictive"


class NoteKind(str, enum.Enum):
    KEY = "key"
    INDEX = "index"
    BRACKET_KEY = "bracket_key"
    WILDCARD = "wildcard"
    ARRAY_WILDCARD = "array_wildcard"


@dataclass(frozen=True)
class Note:
    """One level of a notation.

    ``value`` holds the identifier for KEY, the unquoted text for BRACKET_KEY,
    the integer for INDEX and ``None`` for both wildcards. ``text`` is the
    token as written (e.g. ``["a-b"]``) and is ignored by equality, so
    ``['x']`` and ``["x"]`` are the same note.
    """
    kind: NoteKind
    value: str | int | None = None
    text: str = field(default="", compare=False)

    @property
    def is_wildcard(self) -> bool:
        return self.kind in (NoteKind.WILDCARD, NoteKind.ARRAY_WILDCARD)

    @property
    def is_array(self) -> bool:
        return self.kind in (NoteKind.INDEX, NoteKind.ARRAY_WILDCARD)

    @property
    def is_bracket(self) -> bool:
        return self.text.startswith("[")

    @property
    def key(self) -> str | int | None:
        """Normalized key; ``x`` and ``['x']`` share the key ``"x"``."""
        return self.value

    def __str__(self) -> str:
        return self.text


WILDCARD = Note(NoteKind.WILDCARD, None, "*")
ARRAY_WILDCARD = Note(NoteKind.ARRAY_WILDCARD, None, "[*]")
