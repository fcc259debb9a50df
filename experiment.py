#!/usr/bin/env python3
"""Run a single strategy with detailed per-game output."""

from __future__ import annotations

import argparse
import json
import logging
import math
import random
import sys
from pathlib import Path
from typing import Sequence

import numpy as np

from lexicon import load_answers, load_dictionary
from strategy import Guesser
from strategies import find_strategy
from wordle_env import MAX_ATTEMPTS, Correctness, Guess, Wordle, compute, filter_candidates

RESULTS_DIR = Path(__file__).resolve().parent / "results"


def _entropy_bits(n: int) -> float:
    return math.log2(n) if n > 1 else 0.0


class _Recorder(Guesser):
    """Pass-through guesser that remembers every word it hands out."""

    def __init__(self, inner: Guesser) -> None:
        self._inner = inner
        self.words: list[str] = []

    @property
    def name(self) -> str:
        return self._inner.name

    def guess(self, history: Sequence[Guess]) -> str:
        word = self._inner.guess(history)
        self.words.append(word)
        return word


def run_experiment(
    cls: type[Guesser],
    dictionary: frozenset[str],
    answers: list[str],
    max_attempts: int = MAX_ATTEMPTS,
    seed: int = 42,
    verbose: bool = False,
) -> list[dict]:
    """Play each answer with a fresh *cls* instance and log every step."""
    wordle = Wordle(dictionary=dictionary, max_attempts=max_attempts)
    rng = random.Random(seed)
    logs: list[dict] = []

    for i, answer in enumerate(answers, 1):
        recorder = _Recorder(cls.for_game(wordle.dictionary, seed=rng.randrange(2**31)))
        if verbose:
            print(f"\n--- Game {i}/{len(answers)} | Answer: {answer} ---")

        rounds = wordle.play(answer, recorder)

        candidates = sorted(wordle.dictionary)
        game_log: list[dict] = []
        for word in recorder.words:
            mask = compute(answer, word)
            candidates = filter_candidates(candidates, word, mask)
            ent = _entropy_bits(len(candidates))
            game_log.append({
                "guess": word,
                "mask": [c.value for c in mask],
                "remaining": len(candidates),
                "entropy_bits": round(ent, 3),
            })
            if verbose:
                print(
                    f"  Guess {len(game_log)}: {word}  {Correctness.pattern(mask)}  "
                    f"remaining={len(candidates)}  H={ent:.2f} bits"
                )

        solved = rounds is not None
        logs.append({
            "game": i,
            "answer": answer,
            "solved": solved,
            "num_guesses": rounds if solved else max_attempts,
            "steps": game_log,
        })
        if verbose:
            status = "SOLVED" if solved else "FAILED"
            print(f"  -> {status} in {len(game_log)} guesses")

    return logs


def print_experiment_summary(logs: list[dict], strategy_name: str) -> None:
    n = len(logs)
    if not n:
        print(f"\n=== {strategy_name} — no games ===")
        return
    solved = sum(1 for g in logs if g["solved"])
    guesses = np.array([g["num_guesses"] for g in logs])
    print(f"\n=== {strategy_name} — {n} games ===")
    print(f"  Solved: {solved}/{n} ({100 * solved / n:.1f}%)")
    print(f"  Guesses — mean: {guesses.mean():.2f}, "
          f"median: {np.median(guesses):.1f}, max: {guesses.max()}")


def plot_distribution(logs: list[dict], strategy_name: str, path: Path | None = None) -> None:
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not installed — skipping plot", file=sys.stderr)
        return

    guesses = [g["num_guesses"] for g in logs]
    mx = max(guesses) if guesses else MAX_ATTEMPTS
    bins = list(range(1, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(guesses, bins=bins, edgecolor="black", align="left")
    ax.set_title(f"{strategy_name} — guess distribution")
    ax.set_xlabel("Guesses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    dest = path or RESULTS_DIR / f"experiment_{strategy_name.lower()}.png"
    dest.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(dest, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {dest}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Single-strategy Wordle experiment")
    parser.add_argument("--strategy", type=str, required=True, help="Strategy name")
    parser.add_argument("--dictionary", type=str, default=None, help="Path to dictionary")
    parser.add_argument("--answers", type=str, default=None, help="Path to answer list")
    parser.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, help="Rounds per game")
    parser.add_argument("--num-games", type=int, default=10, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        help="Logging level for library modules (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")

    dictionary = load_dictionary(args.dictionary)
    answers = load_answers(args.answers)
    rng = random.Random(args.seed)
    answers = rng.sample(answers, min(args.num_games, len(answers)))
    print(f"Dictionary: {len(dictionary)} words | Answers: {len(answers)}")

    try:
        cls = find_strategy(args.strategy)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        sys.exit(1)
    name = cls.for_game(dictionary).name
    print(f"Strategy: {name}")

    logs = run_experiment(
        cls,
        dictionary=dictionary,
        answers=answers,
        max_attempts=args.max_attempts,
        seed=args.seed,
        verbose=args.verbose,
    )

    print_experiment_summary(logs, name)

    plot_path = Path(args.plot) if args.plot else RESULTS_DIR / f"experiment_{name.lower()}.png"
    plot_distribution(logs, name, plot_path)

    json_path = Path(args.json) if args.json else RESULTS_DIR / f"experiment_{name.lower()}.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    output = {
        "strategy": name,
        "config": {
            "max_attempts": args.max_attempts,
            "num_games": len(answers),
            "seed": args.seed,
        },
        "summary": {
            "games": len(logs),
            "solved": sum(1 for g in logs if g["solved"]),
            "solve_rate": round(sum(1 for g in logs if g["solved"]) / len(logs), 4) if logs else 0,
            "mean_guesses": round(sum(g["num_guesses"] for g in logs) / len(logs), 3) if logs else 0,
        },
        "games": logs,
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
