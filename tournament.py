#!/usr/bin/env python3
"""Run every discovered strategy over the answer list and compare them.

Features:
  - Auto-discovers built-in strategies (or a subset chosen with --strategy).
  - Runs strategies in parallel (one process per strategy).
  - Every game gets a fresh strategy instance.
  - Outputs summary table, CSV, JSON and histogram.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import os
import random
import sys
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path

import numpy as np

from wordle_env import MAX_ATTEMPTS, Wordle

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------
# Configuration and result containers
# ------------------------------------------------------------------

@dataclass(frozen=True)
class SimulationConfig:
    """Everything a worker process needs to replay its games.

    Attributes
    ----------
    dictionary : frozenset[str]
        Words a strategy may guess.
    answers : tuple[str, ...]
        Answers to play, in order.  Each gets its own game.
    max_attempts : int
        Rounds per game before it counts as lost.
    seed : int
        Master seed; per-game strategy seeds are drawn from it.
    """

    dictionary: frozenset[str]
    answers: tuple[str, ...]
    max_attempts: int = MAX_ATTEMPTS
    seed: int = 42

    def describe(self) -> dict:
        """JSON-friendly summary (the dictionary itself is left out)."""
        return {
            "dictionary_size": len(self.dictionary),
            "num_games": len(self.answers),
            "max_attempts": self.max_attempts,
            "seed": self.seed,
        }


@dataclass
class GameResult:
    strategy: str
    answer: str
    num_guesses: int
    solved: bool


@dataclass
class TournamentResults:
    games: list[GameResult] = field(default_factory=list)

    def by_strategy(self) -> dict[str, list[GameResult]]:
        grouped: dict[str, list[GameResult]] = {}
        for g in self.games:
            grouped.setdefault(g.strategy, []).append(g)
        return grouped

    def summaries(self) -> dict[str, dict]:
        return {
            name: summarize(results)
            for name, results in self.by_strategy().items()
        }

    def to_csv(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["strategy", "answer", "num_guesses", "solved"])
            for g in self.games:
                writer.writerow([g.strategy, g.answer, g.num_guesses, int(g.solved)])

    def to_json(self, path: str | Path, config: SimulationConfig | None = None) -> None:
        """Write per-game results and per-strategy summaries as JSON."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "timestamp": datetime.now().isoformat(),
            "config": config.describe() if config is not None else {},
            "summary": list(self.summaries().values()),
            "games": [asdict(g) for g in self.games],
        }
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def print_summary(self) -> None:
        print(f"\n{'Strategy':<25} {'Games':>6} {'Solved':>7} {'Rate':>6} "
              f"{'Mean':>6} {'Median':>7} {'Max':>5}")
        print("-" * 72)
        # Best (lowest mean) first
        ranking = sorted(self.summaries().values(), key=lambda s: s["mean_guesses"])
        for s in ranking:
            print(f"{s['name']:<25} {s['games_played']:>6} {s['games_solved']:>6}  "
                  f"{100 * s['solve_rate']:>5.1f}% "
                  f"{s['mean_guesses']:>6.2f} {s['median_guesses']:>7.1f} "
                  f"{s['max_guesses']:>5}")
        print()

    def plot_histograms(self, path: str | Path | None = None) -> None:
        try:
            import matplotlib
            matplotlib.use("Agg")
            import matplotlib.pyplot as plt
        except ImportError:
            print("matplotlib not installed — skipping plot", file=sys.stderr)
            return

        by_strat = self.by_strategy()
        strats = sorted(by_strat)
        n_strats = len(strats)
        if n_strats == 0:
            return

        cols = min(n_strats, 4)
        rows = (n_strats + cols - 1) // cols
        fig, axes = plt.subplots(rows, cols, figsize=(5 * cols, 4 * rows), squeeze=False)
        max_guess = max(g.num_guesses for g in self.games)
        bins = list(range(1, max_guess + 2))

        for idx, name in enumerate(strats):
            ax = axes[idx // cols][idx % cols]
            ax.hist([g.num_guesses for g in by_strat[name]], bins=bins,
                    edgecolor="black", align="left")
            ax.set_title(name, fontsize=10)
            ax.set_xlabel("Guesses")
            ax.set_ylabel("Count")

        # Hide unused axes
        for idx in range(n_strats, rows * cols):
            axes[idx // cols][idx % cols].set_visible(False)

        fig.suptitle("Guess-count distribution by strategy")
        fig.tight_layout()
        dest = Path(path) if path else RESULTS_DIR / "tournament_histograms.png"
        dest.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(dest, dpi=150)
        plt.close(fig)
        print(f"Histogram saved to {dest}")


def summarize(results: list[GameResult]) -> dict:
    """Aggregate one strategy's games.

    Unsolved games count with their full attempt budget, so a strategy can't
    improve its mean by giving up.
    """
    guesses = np.array([r.num_guesses for r in results], dtype=float)
    solved = np.array([r.solved for r in results], dtype=bool)
    dist: dict[str, int] = {}
    for r in results:
        key = str(r.num_guesses) if r.solved else "failed"
        dist[key] = dist.get(key, 0) + 1
    n = len(results)
    return {
        "name": results[0].strategy if results else "",
        "games_played": n,
        "games_solved": int(solved.sum()),
        "solve_rate": round(float(solved.mean()), 4) if n else 0.0,
        "mean_guesses": round(float(guesses.mean()), 3) if n else 0.0,
        "median_guesses": float(np.median(guesses)) if n else 0.0,
        "max_guesses": int(guesses.max()) if n else 0,
        "guess_distribution": dist,
    }


# ------------------------------------------------------------------
# Games
# ------------------------------------------------------------------

def play_games(cls, config: SimulationConfig) -> list[GameResult]:
    """Play every answer in *config* with a fresh instance of *cls*."""
    wordle = Wordle(dictionary=config.dictionary, max_attempts=config.max_attempts)
    rng = random.Random(config.seed)
    results: list[GameResult] = []
    for answer in config.answers:
        guesser = cls.for_game(wordle.dictionary, seed=rng.randrange(2**31))
        rounds = wordle.play(answer, guesser)
        results.append(GameResult(
            strategy=guesser.name,
            answer=answer,
            num_guesses=rounds if rounds is not None else config.max_attempts,
            solved=rounds is not None,
        ))
    return results


def _run_strategy_worker(cls_name: str, config: SimulationConfig) -> list[GameResult]:
    """Run a single strategy against all answers. Executed in a subprocess."""
    from strategies import discover_strategies

    for cls in discover_strategies():
        if cls.__name__ == cls_name:
            break
    else:
        raise RuntimeError(f"Strategy class {cls_name} not found")
    return play_games(cls, config)


# ------------------------------------------------------------------
# Tournament runner
# ------------------------------------------------------------------

def run_tournament(
    config: SimulationConfig,
    strategy_names: list[str] | None = None,
    max_workers: int | None = None,
) -> TournamentResults:
    from strategies import discover_strategies, find_strategy, strategy_name

    if strategy_names:
        classes = [find_strategy(name) for name in strategy_names]
    else:
        classes = discover_strategies()

    if not classes:
        print("No strategies found.", file=sys.stderr)
        return TournamentResults()

    if max_workers is None:
        max_workers = min(len(classes), os.cpu_count() or 4, 4)

    print(f"Running {len(classes)} strategies on {len(config.answers)} answers "
          f"(workers: {max_workers}, max attempts: {config.max_attempts}) ...",
          flush=True)

    results = TournamentResults()

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(_run_strategy_worker, cls.__name__, config): strategy_name(cls)
            for cls in classes
        }

        for fut in as_completed(futures):
            name = futures[fut]
            try:
                game_results = fut.result()
            except Exception as exc:
                print(f"  {name:<25} FAILED: {type(exc).__name__}: {exc}", file=sys.stderr)
                continue
            results.games.extend(game_results)
            solved = sum(1 for g in game_results if g.solved)
            mean = sum(g.num_guesses for g in game_results) / len(game_results) if game_results else 0.0
            print(f"  {name:<25} done — {solved}/{len(game_results)} solved, mean {mean:.2f}")

    return results


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------

def main() -> None:
    parser = argparse.ArgumentParser(
        description="Wordle strategy tournament",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python tournament.py                                  # all strategies, bundled lists
  python tournament.py --strategy random                # one strategy only
  python tournament.py --num-games 20 --seed 7          # subsample 20 answers
  python tournament.py --dictionary words.txt --answers answers.txt
""",
    )
    parser.add_argument("--dictionary", type=str, default=None,
                        help="Path to 'word frequency' dictionary (default: bundled)")
    parser.add_argument("--answers", type=str, default=None,
                        help="Path to whitespace-separated answers (default: bundled)")
    parser.add_argument("--strategy", action="append", default=None,
                        help="Strategy name to run (repeatable; default: all)")
    parser.add_argument("--num-games", type=int, default=None,
                        help="Limit number of answers to play")
    parser.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS,
                        help=f"Rounds per game (default: {MAX_ATTEMPTS})")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--workers", type=int, default=None, help="Max parallel workers (default: auto)")
    parser.add_argument("--csv", type=str, default=None, help="Save results CSV path")
    parser.add_argument("--plot", type=str, default=None, help="Save histogram path")
    parser.add_argument("--json", type=str, default=None, help="Save results JSON path")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        help="Logging level for library modules (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")

    from lexicon import load_answers, load_dictionary

    dictionary = load_dictionary(args.dictionary)
    answers = load_answers(args.answers)
    if args.num_games is not None and args.num_games < len(answers):
        answers = random.Random(args.seed).sample(answers, args.num_games)
    print(f"Dictionary: {len(dictionary)} words | Answers: {len(answers)}")

    config = SimulationConfig(
        dictionary=dictionary,
        answers=tuple(answers),
        max_attempts=args.max_attempts,
        seed=args.seed,
    )

    t0 = time.time()
    try:
        results = run_tournament(config, strategy_names=args.strategy, max_workers=args.workers)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        sys.exit(1)
    elapsed = time.time() - t0

    results.print_summary()
    print(f"Elapsed: {elapsed:.1f}s")
    if not results.games:
        return

    csv_path = args.csv or str(RESULTS_DIR / "tournament.csv")
    results.to_csv(csv_path)
    print(f"CSV saved to {csv_path}")

    json_path = args.json or str(RESULTS_DIR / "tournament.json")
    results.to_json(json_path, config)
    print(f"JSON saved to {json_path}")

    results.plot_histograms(args.plot or RESULTS_DIR / "tournament.png")


if __name__ == "__main__":
    main()
