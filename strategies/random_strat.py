"""Random strategy: pick uniformly at random from remaining candidates."""

from __future__ import annotations

import random
from typing import Sequence

from strategy import Guesser
from wordle_env import Guess, filter_candidates


class RandomStrategy(Guesser):
    """Guess a random dictionary word consistent with every mask so far."""

    def __init__(self, dictionary: frozenset[str], seed: int | None = None) -> None:
        # Sorted so that a given seed always yields the same game
        self._vocabulary = sorted(dictionary)
        self._candidates = self._vocabulary
        self._seen = 0
        self._rng = random.Random(seed)

    @classmethod
    def for_game(cls, dictionary: frozenset[str], seed: int | None = None) -> RandomStrategy:
        return cls(dictionary, seed=seed)

    @property
    def name(self) -> str:
        return "Random"

    def guess(self, history: Sequence[Guess]) -> str:
        # Only the guesses made since the last call need filtering
        for g in history[self._seen:]:
            self._candidates = filter_candidates(self._candidates, g.word, g.mask)
        self._seen = len(history)
        if not self._candidates:
            # Answer is outside the dictionary: keep the game going
            return self._rng.choice(self._vocabulary)
        return self._rng.choice(self._candidates)
