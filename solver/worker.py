from __future__ import annotations

import multiprocessing
from dataclasses import dataclass
from typing import Hashable, Sequence

from game.combination import Combination, Feedback
from solver.errors import InvalidFeedback, SolverError
from solver.random_source import RandomSource
from solver.solver_manager import GuessGenerator, validate_configuration
from solver.strategies import MinimaxConfig, StrategyKind


# Messages host -> worker


@dataclass(frozen=True)
class NextGuess:
    """Ask the worker for its next guess."""


@dataclass(frozen=True)
class AcceptFeedback:
    """Hand the feedback for a played guess to the worker."""

    guess: Combination
    feedback: Feedback


# Replies worker -> host


@dataclass(frozen=True)
class GuessReply:
    guess: Combination


@dataclass(frozen=True)
class ErrorReply:
    error: SolverError


def _serve(conn, choices, code_length, strategy, seed, minimax_config):
    """
    Worker process loop: owns one GuessGenerator for its whole lifetime.
    A None message (or a closed pipe) ends the loop.
    """
    generator = GuessGenerator(
        choices,
        code_length,
        strategy=strategy,
        random_source=RandomSource(seed),
        minimax_config=minimax_config,
    )
    # a failed AcceptFeedback is reported as the answer to the next NextGuess
    pending_error = None
    while True:
        try:
            msg = conn.recv()
        except EOFError:
            break
        if msg is None:
            break

        if isinstance(msg, AcceptFeedback):
            try:
                generator.accept_feedback(msg.guess, msg.feedback)
            except SolverError as exc:
                pending_error = pending_error or exc
        elif isinstance(msg, NextGuess):
            if pending_error is not None:
                conn.send(ErrorReply(pending_error))
                pending_error = None
                continue
            try:
                conn.send(GuessReply(generator.next()))
            except SolverError as exc:
                conn.send(ErrorReply(exc))
    conn.close()


class SolverWorker:
    """
    Runs a GuessGenerator in a separate process.

    Only two messages cross the process boundary: NextGuess (answered with
    one combination) and AcceptFeedback (no answer). The worker process is
    the sole owner of the generator state.

    Attributes:
        code_length: int - Number of pegs per combination.
    """

    def __init__(
        self,
        choices: Sequence[Hashable],
        code_length: int,
        *,
        strategy: StrategyKind | str = StrategyKind.NAIVE,
        seed: int | str = 0,
        minimax_config: MinimaxConfig | None = None,
    ):
        choices = tuple(choices)
        validate_configuration(choices, code_length)
        strategy = StrategyKind.parse(strategy)

        self.code_length = code_length
        self._conn, child_conn = multiprocessing.Pipe()
        self._process = multiprocessing.Process(
            target=_serve,
            args=(
                child_conn,
                choices,
                code_length,
                strategy,
                seed,
                minimax_config or MinimaxConfig(),
            ),
            daemon=True,
        )
        self._process.start()
        child_conn.close()
        self._closed = False

    def next(self, timeout: float | None = None) -> Combination:
        """
        Ask the worker for its next guess.

        Args:
            timeout: Wall-clock budget in seconds, None waits forever.
        Returns:
            Combination: The guess.
        Raises:
            TimeoutError: If no guess arrived in time. The worker is stopped,
            since its late answer would be out of step with the host.
            SolverError: Whatever the generator raised in the worker.
        """
        self._ensure_open()
        self._conn.send(NextGuess())
        if not self._conn.poll(timeout):
            self.terminate()
            raise TimeoutError(f"No guess within {timeout} seconds.")

        reply = self._conn.recv()
        if isinstance(reply, ErrorReply):
            raise reply.error
        return reply.guess

    def accept_feedback(
        self, guess: Combination, feedback: Feedback | tuple[int, int]
    ) -> None:
        """Send the feedback for `guess` to the worker. Nothing comes back."""
        self._ensure_open()
        if not isinstance(guess, Combination):
            guess = Combination(guess)
        feedback = Feedback(*feedback)
        if len(guess) != self.code_length:
            raise InvalidFeedback(
                f"Guess length must be {self.code_length}, but got {len(guess)}."
            )
        if not feedback.is_valid_for(self.code_length):
            raise InvalidFeedback(
                f"Feedback {tuple(feedback)} is impossible for "
                f"{self.code_length} pegs."
            )
        self._conn.send(AcceptFeedback(guess, feedback))

    def _ensure_open(self):
        if self._closed:
            raise RuntimeError("The solver worker has been closed.")

    def terminate(self) -> None:
        """Stop the worker immediately."""
        if self._process.is_alive():
            self._process.terminate()
        self._process.join()
        self._conn.close()
        self._closed = True

    def close(self, timeout: float = 5.0) -> None:
        """Ask the worker to finish and wait for it."""
        if self._closed:
            return
        try:
            self._conn.send(None)
        except (BrokenPipeError, OSError):
            # worker already gone
            pass
        self._process.join(timeout)
        self.terminate()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
