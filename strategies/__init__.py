"""Built-in guessers and their auto-discovery.

Every module in this package is imported and scanned for :class:`Guesser`
subclasses.  Classes that set ``discoverable = False`` (e.g. scripted
replays that need constructor arguments) are left out.
"""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from strategy import Guesser
from strategies.naive import Naive
from strategies.random_strat import RandomStrategy
from strategies.scripted import Scripted

_PKG_DIR = Path(__file__).resolve().parent

__all__ = [
    "Naive",
    "RandomStrategy",
    "Scripted",
    "discover_strategies",
    "find_strategy",
    "strategy_name",
]


def _subclasses_in_module(mod) -> list[type[Guesser]]:
    found: list[type[Guesser]] = []
    for attr_name in dir(mod):
        obj = getattr(mod, attr_name)
        if (
            isinstance(obj, type)
            and issubclass(obj, Guesser)
            and obj is not Guesser
            and obj.__module__ == mod.__name__
            and obj.discoverable
        ):
            found.append(obj)
    return found


def discover_strategies() -> list[type[Guesser]]:
    """Return all discoverable Guesser subclasses in this package."""
    found: list[type[Guesser]] = []
    for info in pkgutil.iter_modules([str(_PKG_DIR)]):
        mod = importlib.import_module(f"strategies.{info.name}")
        found.extend(_subclasses_in_module(mod))
    return found


def strategy_name(cls: type[Guesser]) -> str:
    """Report name of *cls* without building a full game instance."""
    return cls.for_game(frozenset()).name


def find_strategy(name: str) -> type[Guesser]:
    """Look up a discoverable strategy by report name (case-insensitive).

    Raises
    ------
    KeyError
        If no strategy has that name.
    """
    classes = discover_strategies()
    for cls in classes:
        if strategy_name(cls).lower() == name.lower():
            return cls
    available = [strategy_name(cls) for cls in classes]
    raise KeyError(f"Strategy {name!r} not found. Available: {available}")
