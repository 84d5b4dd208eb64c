"""Exceptions raised by the glob notation engine."""
from __future__ import annotations


class NotationError(ValueError):
    """Base class for every error raised by :mod:`dotglob`."""


class ParseError(NotationError):
    """A note token or pattern string is malformed."""


class InvalidPatternError(ParseError):
    """A pattern string does not satisfy the glob notation grammar."""

    def __init__(self, glob: object) -> None:
        super().__init__(f"Invalid glob notation: {glob!r}")
        self.glob = glob


class InvalidNotationError(NotationError):
    """A concrete notation was expected but a glob (or garbage) was given."""

    def __init__(self, notation: object) -> None:
        super().__init__(f"Invalid notation: {notation!r}")
        self.notation = notation


class IntegrityError(NotationError):
    """A pattern list mixes array-root and object-root notations."""
