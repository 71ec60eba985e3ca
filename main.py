from __future__ import annotations

import argparse
import time

from game.board import Board
from game.ruleset import DEFAULT_RULES, make_rules
from solver.random_source import RandomSource, derive_seed
from solver.solver_manager import GuessGenerator
from solver.strategies import MinimaxConfig, StrategyKind
from state.persistence import save_results


# Config
code_length = DEFAULT_RULES["code_length"]
num_colors = DEFAULT_RULES["num_colors"]
strategies = [k.value for k in StrategyKind]


def play_game(rules, strategy, seed, minimax_config=None):
    """
    Play one CPU game and time every turn.

    Args:
        rules (dict): The ruleset.
        strategy (str): Strategy name for the GuessGenerator.
        seed (int): Seeds the secret; the random strategy gets a seed derived from it.
        minimax_config (MinimaxConfig, optional): Settings for minimax.
    Returns:
        dict: secret, won, turns, total_time_s and turn_time_s for the game.
    """
    start_time = time.perf_counter()

    board = Board(rules=rules, random_source=RandomSource(seed))
    board.initialize_game()
    generator = GuessGenerator(
        rules["colors"],
        rules["code_length"],
        strategy=strategy,
        random_source=RandomSource(derive_seed(seed, "solver")),
        minimax_config=minimax_config,
    )

    turn_times = []
    last = time.perf_counter()

    def on_turn(attempt, guess, feedback):
        nonlocal last
        now = time.perf_counter()
        turn_times.append(now - last)
        last = now

    board.play_solver(generator, on_turn=on_turn)

    return {
        "secret": board.secret_code.as_list(),
        "won": board.is_won,
        "turns": board.current_attempt,
        "total_time_s": time.perf_counter() - start_time,
        "turn_time_s": turn_times,
    }


def run_benchmark(
    games,
    strategies,
    code_length,
    num_colors,
    seed=0,
    max_attempts=10,
    minimax_config=None,
):
    """
    Play `games` games per strategy on the same secrets.

    Returns:
        dict: {"runs": {"<pegs>x<colors>": {strategy: {"games": {...}}}}}
    """
    rules = make_rules(code_length, num_colors, max_attempts=max_attempts)
    run = {}
    for strategy in strategies:
        column = {
            "secret": [],
            "won": [],
            "turns": [],
            "total_time_s": [],
            "turn_time_s": [],
        }
        for i in range(games):
            result = play_game(rules, strategy, seed + i, minimax_config)
            for key, value in result.items():
                column[key].append(value)
            print(
                f"[{strategy}] game {i + 1}/{games}: "
                f"{'won' if result['won'] else 'lost'} in {result['turns']} turns "
                f"({result['total_time_s']:.2f}s)"
            )
        run[strategy] = {"games": column}

        turns = column["turns"]
        times = column["total_time_s"]
        print(
            f"\n[{strategy}] Average attempts over {games} games: "
            f"{sum(turns) / games:.2f} attempts."
        )
        print(f"[{strategy}] Max attempts over {games} games: {max(turns)} attempts.")
        print(f"[{strategy}] Min attempts over {games} games: {min(turns)} attempts.")
        print(
            f"[{strategy}] Average time over {games} games: "
            f"{sum(times) / games:.2f} seconds.\n"
        )

    return {
        "seed": seed,
        "max_attempts": max_attempts,
        "runs": {f"{code_length}x{num_colors}": run},
    }


def main():
    ap = argparse.ArgumentParser(description="Benchmark the CPU code breaker strategies.")
    ap.add_argument("--games", type=int, default=10, help="Games per strategy")
    ap.add_argument("--strategies", nargs="*", default=strategies,
                    choices=strategies, help="Strategies to benchmark")
    ap.add_argument("--pegs", type=int, default=code_length, help="Code length")
    ap.add_argument("--colors", type=int, default=num_colors, help="Number of symbols")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_RULES["max_attempts"])
    ap.add_argument("--seed", type=int, default=0, help="Seed of the first game")
    ap.add_argument("--out", default="benchmark.json", help="Output JSON path")
    ap.add_argument("--progress", action="store_true",
                    help="Show minimax search progress")
    args = ap.parse_args()

    if args.games <= 0:
        ap.error("--games must be positive")

    results = run_benchmark(
        args.games,
        args.strategies,
        args.pegs,
        args.colors,
        seed=args.seed,
        max_attempts=args.max_attempts,
        minimax_config=MinimaxConfig(progress=args.progress),
    )
    save_results(results, args.out)
    print(f"Results written to {args.out}")


if __name__ == "__main__":
    main()
