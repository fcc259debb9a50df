"""
Shared fixtures for the Wordle simulator tests.

Tests use a small in-memory dictionary so they don't depend on the bundled
word list, except where loading that list is the point of the test.
"""

import pytest

from wordle_env import Wordle


SMALL_DICTIONARY = frozenset([
    "crane", "slate", "moved", "plant", "ghost",
    "steep", "sleek", "raise", "drool", "bonus",
])


@pytest.fixture
def dictionary():
    return SMALL_DICTIONARY


@pytest.fixture
def wordle(dictionary):
    return Wordle(dictionary=dictionary)
