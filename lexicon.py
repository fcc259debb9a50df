"""Word-list loading for the bundled dictionary and answer list.

Two formats:
  - Dictionary: one ``word frequency`` pair per line.  Only the word is kept;
    the frequency column comes from the corpus the list was cut from.
  - Answers: whitespace-separated words, in the order they are played.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_DIR = Path(__file__).resolve().parent
DICTIONARY_PATH = _DIR / "data" / "dictionary.txt"
ANSWERS_PATH = _DIR / "data" / "answers.txt"


def parse_dictionary(text: str, source: str = "<string>") -> frozenset[str]:
    """Parse ``word frequency`` lines into a set of words.

    Raises
    ------
    ValueError
        If a non-blank line has no space separator.
    """
    words: set[str] = set()
    for lineno, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        word, sep, _frequency = line.partition(" ")
        if not sep:
            raise ValueError(
                f"{source}:{lineno}: expected 'word frequency', got {line!r}"
            )
        words.add(word)
    return frozenset(words)


def load_dictionary(path: str | Path | None = None) -> frozenset[str]:
    """Load the set of guessable words.

    Parameters
    ----------
    path : str, Path or None
        Word-frequency file.  None uses the bundled ``data/dictionary.txt``.
    """
    src = Path(path) if path is not None else DICTIONARY_PATH
    if not src.exists():
        raise FileNotFoundError(f"Dictionary not found: {src}")
    words = parse_dictionary(src.read_text(encoding="utf-8"), source=str(src))
    logger.info("Loaded %d dictionary words from %s", len(words), src)
    return words


def load_answers(path: str | Path | None = None) -> list[str]:
    """Load the answers to simulate, keeping file order and duplicates."""
    src = Path(path) if path is not None else ANSWERS_PATH
    if not src.exists():
        raise FileNotFoundError(f"Answer list not found: {src}")
    answers = src.read_text(encoding="utf-8").split()
    logger.info("Loaded %d answers from %s", len(answers), src)
    return answers
