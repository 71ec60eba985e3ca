# # Command-line interface (text-based play)
from __future__ import annotations

import argparse

from game.board import Board
from game.ruleset import DEFAULT_RULES, make_rules
from solver.random_source import RandomSource, derive_seed
from solver.solver_manager import GuessGenerator
from solver.strategies import MinimaxConfig, StrategyKind
from solver.worker import SolverWorker

MAX_TYPED_COLORS = 9


def gameloop(rules=None):
    """Human player: guess a random secret."""
    rules = rules or DEFAULT_RULES
    symbols = "".join(str(c) for c in rules["colors"])
    print("=== Mastermind CLI ===")
    print(
        f"Type symbols without spaces (e.g. {symbols[:rules['code_length']]}). "
        "Type 'exit' to quit, 'save' to store, 'load <file>' to resume.\n"
    )

    b = Board(rules=rules)
    b.initialize_game()

    while not b.is_over:
        print(f"\nAttempts left: {b.remaining_attempts()}")
        print(f"Available colors: {', '.join(str(c) for c in b.rules['colors'])}")
        user_input = input("Enter your guess: ").strip().upper()

        # handle special commands
        if user_input == "EXIT":
            print("Exiting game.")
            break
        elif user_input == "SAVE":
            b.save()
            print("Game saved.")
            continue
        elif user_input.startswith("LOAD"):
            try:
                b = Board.from_file(user_input.split(" ")[1].lower())
                print("Game loaded.")
            except (IndexError, OSError, ValueError, KeyError) as e:
                print(f"Error loading save: {e}")
            continue

        # Make the guess
        if b.make_guess(user_input) is None:
            continue

        # Render current board
        b.render()

        # Check win/loss
        if b.is_won:
            print("\nCongratulations, you cracked the code!")
            print(f"The secret code was: {b.reveal_code()}")
            break
        elif b.is_over:
            print("\nNo more attempts left.")
            print(f"The secret code was: {b.reveal_code()}")
            break

    print("\n=== Game Over ===")


def watch(rules, strategy, seed=None, use_worker=False, timeout=None, progress=False):
    """CPU player: watch a strategy crack a random secret."""
    source = RandomSource(seed)
    b = Board(rules=rules, random_source=source)
    b.initialize_game()
    print(f"=== CPU plays with the {strategy} strategy (seed {source.seed}) ===")

    def on_turn(attempt, guess, feedback):
        print(f"guess {attempt} {guess} {feedback}")

    minimax_config = MinimaxConfig(progress=progress)
    solver_seed = derive_seed(source.seed, "solver")
    if use_worker:
        with SolverWorker(
            rules["colors"],
            rules["code_length"],
            strategy=strategy,
            seed=solver_seed,
            minimax_config=minimax_config,
        ) as worker:
            solver = _TimedSolver(worker, timeout)
            try:
                b.play_solver(solver, on_turn=on_turn)
            except TimeoutError as e:
                print(f"CPU gave up: {e}")
                print(f"LOSE secret was {b.reveal_code()}")
                return False
    else:
        generator = GuessGenerator(
            rules["colors"],
            rules["code_length"],
            strategy=strategy,
            random_source=RandomSource(solver_seed),
            minimax_config=minimax_config,
        )
        b.play_solver(generator, on_turn=on_turn)

    if b.is_won:
        print(f"WIN secret was {b.reveal_code()}")
    else:
        print(f"LOSE secret was {b.reveal_code()}")
    return b.is_won


class _TimedSolver:
    """Applies a per-guess wall-clock budget to a SolverWorker."""

    def __init__(self, worker, timeout):
        self.worker = worker
        self.timeout = timeout

    def next(self):
        return self.worker.next(timeout=self.timeout)

    def accept_feedback(self, guess, feedback):
        self.worker.accept_feedback(guess, feedback)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    ap.add_argument("mode", choices=["play", "watch"], nargs="?", default="play",
                    help="play: you guess, watch: the CPU guesses")
    ap.add_argument("--strategy", default=DEFAULT_RULES["strategy"],
                    choices=[k.value for k in StrategyKind])
    ap.add_argument("--tries", type=int, default=DEFAULT_RULES["max_attempts"])
    ap.add_argument("--pegs", type=int, default=DEFAULT_RULES["code_length"])
    ap.add_argument("--colors", type=int, default=DEFAULT_RULES["num_colors"])
    ap.add_argument("--seed", type=int, default=DEFAULT_RULES["seed"])
    ap.add_argument("--worker", action="store_true",
                    help="Run the CPU player in a background process")
    ap.add_argument("--timeout", type=float, default=None,
                    help="Seconds allowed per CPU guess (with --worker)")
    ap.add_argument("--progress", action="store_true",
                    help="Show minimax search progress")
    args = ap.parse_args(argv)

    # typed guesses are read one character per peg
    if args.mode == "play" and args.colors > MAX_TYPED_COLORS:
        ap.error(f"play mode supports at most {MAX_TYPED_COLORS} colors")

    rules = make_rules(args.pegs, args.colors, max_attempts=args.tries, seed=args.seed)
    if args.mode == "play":
        gameloop(rules)
    else:
        watch(
            rules,
            args.strategy,
            seed=args.seed,
            use_worker=args.worker,
            timeout=args.timeout,
            progress=args.progress,
        )


if __name__ == "__main__":
    main()
