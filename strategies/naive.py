"""Placeholder strategy that has not been written yet."""

from __future__ import annotations

from typing import Sequence

from strategy import Guesser
from wordle_env import Guess


class Naive(Guesser):
    """Stand-in for a real strategy; every call fails."""

    def guess(self, history: Sequence[Guess]) -> str:
        raise NotImplementedError("Naive strategy has no guessing logic yet")
