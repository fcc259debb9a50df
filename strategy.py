"""Abstract base class for Wordle guessers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from wordle_env import Guess


class Guesser(ABC):
    """Interface that every guessing strategy must implement.

    A new instance is created for every game, so subclasses may keep
    per-game state (candidate sets, counters) on ``self`` freely.
    """

    #: Whether strategy discovery should pick this class up for batch runs.
    discoverable = True

    @classmethod
    def for_game(cls, dictionary: frozenset[str], seed: int | None = None) -> Guesser:
        """Build a fresh instance for one game.

        The default ignores both arguments; strategies that need the word
        list or randomness override this.
        """
        return cls()

    @property
    def name(self) -> str:
        """Human-readable strategy name (used in reports)."""
        return type(self).__name__

    @abstractmethod
    def guess(self, history: Sequence[Guess]) -> str:
        """Return the next word given the guesses made so far.

        *history* is empty on the first round.  The returned word must be in
        the engine's dictionary unless it is the answer.
        """
        ...


class FunctionGuesser(Guesser):
    """Adapt a plain ``fn(history) -> word`` callable to :class:`Guesser`."""

    def __init__(self, fn: Callable[[Sequence[Guess]], str]) -> None:
        self._fn = fn

    @property
    def name(self) -> str:
        return getattr(self._fn, "__name__", "function")

    def guess(self, history: Sequence[Guess]) -> str:
        return self._fn(history)
