"""Test configuration ensuring the local package is importable."""

from __future__ import annotations

import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

path_str = str(SRC)
if path_str not in sys.path:
    sys.path.insert(0, path_str)

# building blocks for randomly generated globs and notations
OBJECT_NOTES = ["a", "b", "user", "['x-y']", "*"]
ARRAY_NOTES = ["[0]", "[1]", "[*]"]


def random_glob(rng: np.random.Generator, max_depth: int = 4, wildcards: bool = True) -> str:
    depth = int(rng.integers(1, max_depth + 1))
    parts: list[str] = []
    for index in range(depth):
        pool = OBJECT_NOTES if index == 0 or rng.random() < 0.7 else ARRAY_NOTES
        if not wildcards:
            pool = [note for note in pool if "*" not in note]
        note = pool[int(rng.integers(len(pool)))]
        if index and not note.startswith("["):
            parts.append(".")
        parts.append(note)
    return "".join(parts)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240611)


@pytest.fixture
def make_glob(rng: np.random.Generator):
    """Factory for random globs drawn from a small vocabulary."""

    def _make(max_depth: int = 4, wildcards: bool = True) -> str:
        return random_glob(rng, max_depth=max_depth, wildcards=wildcards)

    return _make
