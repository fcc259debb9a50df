"""Wordle engine: correctness masks and the guess loop."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from lexicon import load_dictionary

if TYPE_CHECKING:
    from strategy import Guesser

logger = logging.getLogger(__name__)

WORD_LENGTH = 5
MAX_ATTEMPTS = 32


class Correctness(enum.Enum):
    """Per-letter classification of a guess against the answer."""

    CORRECT = "C"    # green
    MISPLACED = "M"  # yellow
    WRONG = "W"      # grey

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @staticmethod
    def pattern(mask: Iterable[Correctness]) -> str:
        """Render *mask* as a row of coloured squares."""
        return "".join(c.emoji for c in mask)


_EMOJI = {
    Correctness.CORRECT: "\U0001f7e9",
    Correctness.MISPLACED: "\U0001f7e8",
    Correctness.WRONG: "⬛",
}


def _check_length(kind: str, word: str) -> None:
    if len(word) != WORD_LENGTH:
        raise ValueError(
            f"{kind} {word!r} has length {len(word)}, expected {WORD_LENGTH}"
        )


def compute(answer: str, guess: str) -> tuple[Correctness, ...]:
    """Return the mask for *guess* against *answer*.

    Greens are marked first and consume their answer position.  Every other
    guess letter then claims the leftmost unconsumed matching answer letter,
    in guess order; a letter with nothing left to claim is grey even if it
    occurs elsewhere in the answer.
    """
    _check_length("answer", answer)
    _check_length("guess", guess)

    mask = [Correctness.WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1 – greens
    for i, (a, g) in enumerate(zip(answer, guess)):
        if a == g:
            mask[i] = Correctness.CORRECT
            used[i] = True

    # Pass 2 – yellows
    for i, g in enumerate(guess):
        if mask[i] is Correctness.CORRECT:
            continue
        for j, a in enumerate(answer):
            if a == g and not used[j]:
                used[j] = True
                mask[i] = Correctness.MISPLACED
                break

    return tuple(mask)


@dataclass(frozen=True)
class Guess:
    """A submitted word together with the mask it earned."""

    word: str
    mask: tuple[Correctness, ...]


def filter_candidates(
    candidates: Iterable[str],
    guess: str,
    mask: tuple[Correctness, ...],
) -> list[str]:
    """Keep only candidates that would have produced *mask* for *guess*."""
    return [w for w in candidates if compute(w, guess) == mask]


class Wordle:
    """Plays games against a fixed dictionary.

    Parameters
    ----------
    dictionary : iterable of str or None
        Words a guesser may submit.  None loads the bundled word list.
    max_attempts : int
        Number of rounds before a game counts as lost.
    """

    def __init__(
        self,
        dictionary: Iterable[str] | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        if dictionary is None:
            dictionary = load_dictionary()
        self._dictionary = frozenset(dictionary)
        self._max_attempts = max_attempts

    @property
    def dictionary(self) -> frozenset[str]:
        return self._dictionary

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def play(self, answer: str, guesser: Guesser) -> int | None:
        """Run one game and return the winning round, or None if exhausted.

        Raises
        ------
        ValueError
            If *answer* or a guess has the wrong length, or the guesser
            submits a word outside the dictionary.
        """
        _check_length("answer", answer)
        history: list[Guess] = []
        for round_no in range(1, self._max_attempts + 1):
            word = guesser.guess(tuple(history))
            if word == answer:
                logger.debug("round %d: %s solved", round_no, word)
                return round_no
            if word not in self._dictionary:
                raise ValueError(f"{word!r} is not in the dictionary")
            mask = compute(answer, word)
            logger.debug("round %d: %s %s", round_no, word, Correctness.pattern(mask))
            history.append(Guess(word=word, mask=mask))
        return None
