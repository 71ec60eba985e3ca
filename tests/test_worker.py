"""Unit tests for the background solver process."""

import unittest

from game.combination import Combination, Feedback
from solver.errors import ExhaustedCandidateSpace, InvalidConfiguration, InvalidFeedback
from solver.solver_manager import GuessGenerator
from solver.worker import SolverWorker


class TestSolverWorker(unittest.TestCase):

    def test_same_guesses_as_in_process_generator(self) -> None:
        secret = Combination([3, 1, 2])
        local = GuessGenerator([1, 2, 3], 3, strategy="minimax")
        with SolverWorker([1, 2, 3], 3, strategy="minimax") as worker:
            for _ in range(10):
                guess = worker.next(timeout=30)
                self.assertEqual(guess, local.next())
                feedback = secret.compare(guess)
                if feedback.is_win(3):
                    break
                worker.accept_feedback(guess, feedback)
                local.accept_feedback(guess, feedback)
            self.assertEqual(guess, secret)

    def test_invalid_feedback_raises_in_host(self) -> None:
        with SolverWorker([1, 2], 2) as worker:
            with self.assertRaises(InvalidFeedback):
                worker.accept_feedback(Combination([1, 1]), Feedback(2, 1))
            with self.assertRaises(InvalidFeedback):
                worker.accept_feedback(Combination([1, 1, 1]), Feedback(0, 0))
            self.assertEqual(worker.next(timeout=30), Combination([1, 2]))

    def test_worker_errors_are_reraised(self) -> None:
        with SolverWorker([1, 2], 2) as worker:
            worker.accept_feedback([1, 1], (0, 0))
            worker.accept_feedback([2, 2], (0, 0))
            with self.assertRaises(ExhaustedCandidateSpace):
                worker.next(timeout=30)

    def test_bad_configuration_fails_before_start(self) -> None:
        with self.assertRaises(InvalidConfiguration):
            SolverWorker([], 4)
        with self.assertRaises(InvalidConfiguration):
            SolverWorker([1, 2], 2, strategy="unknown")

    def test_closed_worker_refuses_messages(self) -> None:
        worker = SolverWorker([1, 2], 2)
        worker.close()
        with self.assertRaises(RuntimeError):
            worker.next()


if __name__ == "__main__":
    unittest.main()
