"""dotglob: algebra of dot/bracket notation globs with wildcards and negation.

Quick Start:
    >>> from dotglob import normalize, union, covers
    >>> normalize(["car.*", "!*.model"])
    ['car', '!car.model']
    >>> union(["*", "!id", "!pwd"], ["*", "!pwd", "title"])
    ['*', '!pwd']
    >>> covers("*.y", "x.y")
    True
"""

from .engine.errors import (
    IntegrityError,
    InvalidNotationError,
    InvalidPatternError,
    NotationError,
    ParseError,
)
from .engine.intersection import intersect
from .engine.matcher import covers, matches, test, to_regexp
from .engine.models import Note, NoteKind, Policy
from .engine.normalize import normalize
from .engine.ordering import compare, sort
from .engine.pattern import Pattern
from .engine.tokens import parse_note
from .engine.union import union

__version__ = "1.0.0"

__all__ = [
    "IntegrityError",
    "InvalidNotationError",
    "InvalidPatternError",
    "NotationError",
    "ParseError",
    "Note",
    "NoteKind",
    "Pattern",
    "Policy",
    "compare",
    "covers",
    "intersect",
    "matches",
    "normalize",
    "parse_note",
    "sort",
    "test",
    "to_regexp",
    "union",
]
