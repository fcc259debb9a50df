"""
Tests for correctness masks and candidate filtering.
"""

import dataclasses
import random
from collections import Counter

import pytest

from wordle_env import Correctness, Guess, compute, filter_candidates

C = Correctness.CORRECT
M = Correctness.MISPLACED
W = Correctness.WRONG


def mask(spec: str) -> tuple:
    """Build a mask from a compact string like "CCWWM"."""
    return tuple(Correctness(ch) for ch in spec)


@pytest.mark.parametrize("answer, guess, expected", [
    ("abcde", "abcde", "CCCCC"),
    ("abcde", "fghij", "WWWWW"),
    ("abcde", "eabcd", "MMMMM"),
    ("aabbb", "aaccc", "CCWWW"),
    ("aabbb", "ccaac", "WWMMW"),
    ("aabbb", "caacc", "WCMWW"),
    ("azzaz", "aaabb", "CMWWW"),
    ("steep", "raise", "WWWMM"),
    ("steep", "sleek", "CWCCW"),
])
def test_compute_examples(answer, guess, expected):
    assert compute(answer, guess) == mask(expected)


def test_compute_returns_tuple_of_five():
    result = compute("crane", "slate")
    assert isinstance(result, tuple)
    assert len(result) == 5
    assert all(isinstance(c, Correctness) for c in result)


@pytest.mark.parametrize("answer, guess", [
    ("abcd", "abcde"),
    ("abcde", "abcdef"),
    ("", "abcde"),
    ("abcde", ""),
])
def test_compute_rejects_wrong_length(answer, guess):
    with pytest.raises(ValueError):
        compute(answer, guess)


def test_earlier_guess_letter_claims_answer_letter_first():
    # Only one "e" in the answer; the first unmatched "e" in the guess gets it
    assert compute("eabcd", "xeexx") == mask("WMWWW")


def test_letter_already_consumed_is_wrong():
    # Both "a"s are used by greens, so the third "a" is grey
    assert compute("aaxyz", "aaaqq") == mask("CCWWW")


def _random_words(rng, n, alphabet="abc"):
    return ["".join(rng.choice(alphabet) for _ in range(5)) for _ in range(n)]


def test_correct_iff_same_letter():
    rng = random.Random(0)
    answers = _random_words(rng, 200)
    guesses = _random_words(rng, 200)
    for answer, guess in zip(answers, guesses):
        result = compute(answer, guess)
        for i in range(5):
            assert (result[i] is C) == (answer[i] == guess[i])


def test_letter_conservation():
    rng = random.Random(1)
    answers = _random_words(rng, 300)
    guesses = _random_words(rng, 300)
    for answer, guess in zip(answers, guesses):
        result = compute(answer, guess)
        credited = Counter(g for g, c in zip(guess, result) if c is not W)
        answer_counts = Counter(answer)
        guess_counts = Counter(guess)
        for letter, count in credited.items():
            assert count <= answer_counts[letter]
            assert count <= guess_counts[letter]


def test_pattern_rendering():
    assert Correctness.pattern(mask("CMW")) == "\U0001f7e9\U0001f7e8⬛"


def test_guess_is_immutable():
    g = Guess(word="crane", mask=mask("CCCCC"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        g.word = "slate"


def test_filter_candidates_keeps_consistent_words():
    candidates = ["crane", "slate", "plant", "ghost"]
    result = filter_candidates(candidates, "slate", compute("plant", "slate"))
    assert "plant" in result
    assert "slate" not in result
    assert all(compute(w, "slate") == compute("plant", "slate") for w in result)
