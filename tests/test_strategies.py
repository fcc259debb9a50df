"""
Tests for the built-in strategies and discovery.
"""

import pytest

from strategy import FunctionGuesser, Guesser
from strategies import (
    Naive,
    RandomStrategy,
    Scripted,
    discover_strategies,
    find_strategy,
    strategy_name,
)
from wordle_env import MAX_ATTEMPTS, Guess, compute


def test_scripted_replays_words_in_order():
    s = Scripted(["crane", "slate"])
    assert s.guess(()) == "crane"
    assert s.guess(()) == "slate"


def test_scripted_raises_when_exhausted():
    s = Scripted(["crane"])
    s.guess(())
    with pytest.raises(IndexError):
        s.guess(())


def test_naive_raises():
    with pytest.raises(NotImplementedError):
        Naive().guess(())


def test_function_guesser_name():
    def my_strategy(history):
        return "crane"

    g = FunctionGuesser(my_strategy)
    assert g.name == "my_strategy"
    assert g.guess(()) == "crane"


def test_default_name_is_class_name():
    assert Naive().name == "Naive"


def test_random_guesses_are_consistent_with_history(dictionary):
    history = [Guess(word="slate", mask=compute("plant", "slate"))]
    for seed in range(10):
        word = RandomStrategy(dictionary, seed=seed).guess(history)
        assert compute(word, "slate") == history[0].mask
    assert RandomStrategy(dictionary, seed=3).guess(()) in dictionary


def test_random_falls_back_when_nothing_fits(dictionary):
    s = RandomStrategy(dictionary, seed=0)
    impossible = [Guess(word="crane", mask=compute("zzzzz", "crane"))]
    impossible.append(Guess(word="crane", mask=compute("crane", "crane")))
    assert s.guess(impossible) in dictionary


def test_random_solves_every_answer(wordle, dictionary):
    for seed, answer in enumerate(sorted(dictionary)):
        rounds = wordle.play(answer, RandomStrategy.for_game(dictionary, seed=seed))
        assert rounds is not None
        assert 1 <= rounds <= MAX_ATTEMPTS


def test_random_is_reproducible(wordle, dictionary):
    a = wordle.play("plant", RandomStrategy(dictionary, seed=11))
    b = wordle.play("plant", RandomStrategy(dictionary, seed=11))
    assert a == b


def test_discovery_finds_builtins():
    classes = discover_strategies()
    assert Naive in classes
    assert RandomStrategy in classes
    assert Scripted not in classes
    assert all(issubclass(cls, Guesser) for cls in classes)
    assert len(classes) == len(set(classes))


def test_find_strategy_by_name():
    assert find_strategy("random") is RandomStrategy
    assert find_strategy("NAIVE") is Naive
    assert strategy_name(RandomStrategy) == "Random"


def test_find_strategy_unknown():
    with pytest.raises(KeyError):
        find_strategy("oracle")
