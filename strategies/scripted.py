"""Scripted strategy: replay a fixed list of words."""

from __future__ import annotations

from typing import Iterable, Sequence

from strategy import Guesser
from wordle_env import Guess


class Scripted(Guesser):
    """Return the given words in order, one per round.

    Useful for tests and for replaying a recorded game.  Running past the end
    of the script raises ``IndexError``.
    """

    discoverable = False

    def __init__(self, words: Iterable[str]) -> None:
        self._words = list(words)
        self._next = 0

    @property
    def name(self) -> str:
        return "Scripted"

    def guess(self, history: Sequence[Guess]) -> str:
        if self._next >= len(self._words):
            raise IndexError(
                f"script exhausted after {len(self._words)} guesses"
            )
        word = self._words[self._next]
        self._next += 1
        return word
