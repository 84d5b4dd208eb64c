"""Tests for glob list normalization."""

import pytest

from dotglob import IntegrityError, ParseError, Policy, normalize

LOOSE_CASES = [
    ([], []),
    (["car", "dog", "car"], ["car", "dog"]),
    (["*", "id", "!id"], ["*", "!id"]),
    (["car.*", "car.model"], ["car"]),
    (["*", "car", "!car.model"], ["*", "!car.model"]),
    (["car.*", "!*.model"], ["car", "!car.model"]),
    (["*", "car.model", "!car.*"], ["*", "!car.*", "car.model"]),
    (["*", "!id", "name", "!car.model", "car.*", "id", "name"], ["*", "!id", "!car.model"]),
    (["!*.id", "user.*", "company"], ["company", "user", "!company.id", "!user.id"]),
    (["x", "!*"], ["x"]),
    (["[*]", "![0]"], ["[*]", "![0]"]),
    (["x"], ["x"]),
    (["x.*"], ["x"]),
    (["!x"], []),
    (["!x", "!x"], []),
    (["!*"], []),
    (["*", "!a", "!*"], []),
    (["!b", "*", "x", "!*"], ["x"]),
]

RESTRICTIVE_CASES = [
    (["*", "car.model", "!car.*"], ["*", "!car.*"]),
    (["*", "!*"], []),
    (["x", "y", "!*"], []),
    (["[0]", "[1].a", "![*]"], []),
    (["*", "id", "!id"], ["*", "!id"]),
    (["*", "a.b", "a"], ["*"]),
    (["a", "a.b", "!a.b.c"], ["a", "!a.b.c"]),
]


@pytest.mark.parametrize("globs,expected", LOOSE_CASES)
def test_normalize_loose(globs: list[str], expected: list[str]) -> None:
    assert normalize(globs) == expected


@pytest.mark.parametrize("globs,expected", RESTRICTIVE_CASES)
def test_normalize_restrictive(globs: list[str], expected: list[str]) -> None:
    assert normalize(globs, restrictive=True) == expected


@pytest.mark.parametrize("restrictive", [False, True])
@pytest.mark.parametrize("globs", [globs for globs, _ in LOOSE_CASES + RESTRICTIVE_CASES])
def test_normalize_is_idempotent(globs: list[str], restrictive: bool) -> None:
    once = normalize(globs, restrictive)
    assert normalize(once, restrictive) == once


def test_normalize_accepts_policy_and_single_glob() -> None:
    globs = ["*", "car.model", "!car.*"]
    assert normalize(globs, Policy.RESTRICTIVE) == normalize(globs, True)
    assert normalize(globs, "loose") == normalize(globs)
    assert normalize("x.*") == ["x"]
    assert normalize(None) == []


def test_normalize_does_not_mutate_input() -> None:
    globs = ["car.*", "!*.model"]
    normalize(globs)
    assert globs == ["car.*", "!*.model"]


def test_normalize_rejects_mixed_array_and_object_roots() -> None:
    with pytest.raises(IntegrityError):
        normalize(["x.y", "[0].z"])


def test_normalize_rejects_invalid_globs() -> None:
    with pytest.raises(ParseError):
        normalize(["x", "x..y"])
    with pytest.raises(ParseError):
        normalize(["x..y"])


def _random_globs(rng, make_glob) -> list[str]:
    globs = []
    for _ in range(int(rng.integers(2, 6))):
        glob = make_glob(max_depth=3)
        globs.append("!" + glob if rng.random() < 0.4 else glob)
    return globs


@pytest.mark.parametrize("restrictive", [False, True])
def test_normalize_is_idempotent_on_random_lists(rng, make_glob, restrictive: bool) -> None:
    for _ in range(300):
        globs = _random_globs(rng, make_glob)
        once = normalize(globs, restrictive)
        assert normalize(once, restrictive) == once, globs


@pytest.mark.parametrize("restrictive", [False, True])
def test_normalize_ignores_input_order(rng, make_glob, restrictive: bool) -> None:
    for _ in range(100):
        globs = _random_globs(rng, make_glob)
        shuffled = [globs[i] for i in rng.permutation(len(globs))]
        assert normalize(shuffled, restrictive) == normalize(globs, restrictive), globs
