"""Unit tests for the terminal front end."""

import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest import mock

from game.ruleset import make_rules
from ui import cli


class TestWatch(unittest.TestCase):

    def test_cpu_wins_with_each_strategy(self) -> None:
        rules = make_rules(3, 4, max_attempts=64)
        for strategy in ("naive", "random", "minimax"):
            with self.subTest(strategy=strategy):
                out = StringIO()
                with redirect_stdout(out):
                    self.assertTrue(cli.watch(rules, strategy, seed=4))
                self.assertIn("WIN", out.getvalue())
                self.assertIn("guess 1 122", out.getvalue())

    def test_watch_through_worker(self) -> None:
        rules = make_rules(3, 3, max_attempts=27)
        with redirect_stdout(StringIO()):
            self.assertTrue(
                cli.watch(rules, "minimax", seed=2, use_worker=True, timeout=60)
            )

    def test_timeout_ends_the_game(self) -> None:
        rules = make_rules(3, 4, max_attempts=64)
        out = StringIO()
        with mock.patch.object(
            cli.SolverWorker,
            "next",
            side_effect=TimeoutError("No guess within 0.0001 seconds."),
        ), redirect_stdout(out):
            won = cli.watch(rules, "minimax", seed=3, use_worker=True, timeout=0.0001)
        self.assertFalse(won)
        self.assertIn("CPU gave up: No guess within 0.0001 seconds.", out.getvalue())
        self.assertIn("LOSE secret was", out.getvalue())

    def test_main_parses_arguments(self) -> None:
        out = StringIO()
        with redirect_stdout(out):
            cli.main(["watch", "--strategy", "naive", "--seed", "8", "--pegs", "2", "--colors", "3"])
        self.assertIn("naive strategy (seed 8)", out.getvalue())


class TestGameloop(unittest.TestCase):

    def test_play_rejects_untypeable_colors(self) -> None:
        with redirect_stderr(StringIO()), self.assertRaises(SystemExit):
            cli.main(["play", "--colors", "10"])

    def test_exit_command(self) -> None:
        out = StringIO()
        with mock.patch("builtins.input", side_effect=["exit"]), redirect_stdout(out):
            cli.gameloop(make_rules(seed=1))
        self.assertIn("Exiting game.", out.getvalue())

    def test_invalid_then_exit(self) -> None:
        out = StringIO()
        with mock.patch("builtins.input", side_effect=["12", "exit"]), redirect_stdout(out):
            cli.gameloop(make_rules(seed=1))
        self.assertIn("Invalid input", out.getvalue())


if __name__ == "__main__":
    unittest.main()
