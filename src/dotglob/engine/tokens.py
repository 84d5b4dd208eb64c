"""Tokenization of glob notations into notes."""
from __future__ import annotations

import re

from .errors import InvalidPatternError, ParseError
from .models import ARRAY_WILDCARD, WILDCARD, Note, NoteKind
from .utils import strip_trailing_wildcards

_IDENT = r"[A-Za-z$_][A-Za-z$_0-9]*"
_BRACKET = r"""\[(?:[0-9]+|\*|"[^"]*"|'[^']*')\]"""

# optional bang, one leading note, then dotted or adjoining bracket notes
_VALIDATOR_RE = re.compile(rf"!?(?:\*|{_IDENT}|{_BRACKET})(?:{_BRACKET}|\.{_IDENT}|\.\*)*")
_NOTE_RE = re.compile(rf"{_BRACKET}|{_IDENT}|\*")

_IDENT_RE = re.compile(_IDENT)
_INDEX_RE = re.compile(r"\[([0-9]+)\]")
_QUOTED_RE = re.compile(r"""\[(?:'([^']*)'|"([^"]*)")\]""")


def parse_note(token: str) -> Note:
    """Turn a single token into a :class:`Note`.

    >>> parse_note("[2]")
    Note(kind=<NoteKind.INDEX: 'index'>, value=2, text='[2]')
    """
    if not isinstance(token, str):
        raise ParseError(f"Invalid note: {token!r}")
    if token == "*":
        return WILDCARD
    if token == "[*]":
        return ARRAY_WILDCARD
    if _IDENT_RE.fullmatch(token):
        return Note(NoteKind.KEY, token, token)
    match = _INDEX_RE.fullmatch(token)
    if match:
        return Note(NoteKind.INDEX, int(match.group(1)), token)
    match = _QUOTED_RE.fullmatch(token)
    if match:
        inner = match.group(1) if match.group(1) is not None else match.group(2)
        return Note(NoteKind.BRACKET_KEY, inner, token)
    raise ParseError(f"Invalid note: {token!r}")


def is_valid_glob(glob: object) -> bool:
    return isinstance(glob, str) and _VALIDATOR_RE.fullmatch(glob) is not None


def tokenize(glob: str) -> list[str]:
    """Split a glob into its raw note tokens, dropping any leading ``!``."""
    if not is_valid_glob(glob):
        raise InvalidPatternError(glob)
    body = glob[1:] if glob.startswith("!") else glob
    return [m.group(0) for m in _NOTE_RE.finditer(body)]


def split_notes(glob: str, normalize: bool = False) -> list[Note]:
    """Parse ``glob`` into notes.

    With ``normalize`` the redundant trailing wildcards of a non-negated glob
    are dropped first (``x.*[*]`` -> ``[x]``).
    """
    notes = [parse_note(token) for token in tokenize(glob)]
    if normalize and not glob.startswith("!"):
        notes = strip_trailing_wildcards(notes)
    return notes
