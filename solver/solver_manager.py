from __future__ import annotations

from typing import Hashable, Sequence

from game.combination import Combination, Feedback
from solver.candidates import CandidateSpace
from solver.errors import (
    ExhaustedCandidateSpace,
    InvalidConfiguration,
    InvalidFeedback,
)
from solver.permutations import count_permutations, permutations
from solver.random_source import RandomSource
from solver.strategies import MinimaxConfig, StrategyKind, choose_guess


def validate_configuration(choices: Sequence[Hashable], code_length: int) -> None:
    """
    Check an (alphabet, length) pair before any space is built.

    Raises:
        InvalidConfiguration: Empty alphabet, repeated symbols or a
        non-positive length.
    """
    if not choices:
        raise InvalidConfiguration("The alphabet must not be empty.")
    if len(set(choices)) != len(choices):
        raise InvalidConfiguration("The alphabet must not repeat symbols.")
    if code_length <= 0:
        raise InvalidConfiguration(
            f"Code length must be positive, but got {code_length}."
        )


class GuessGenerator:
    """
    CPU code breaker: owns the candidate space and the active strategy and
    runs the guess / feedback cycle for one game.

    Attributes:
        choices: tuple - The alphabet, in enumeration order.
        code_length: int - Number of pegs per combination.
        strategy: StrategyKind - The active guess-selection rule.
        random_source: RandomSource - Draws for the random strategy.
        minimax_config: MinimaxConfig - Settings for the minimax scan.

    Methods:
        next(): Next guess to play.
        accept_feedback(guess, feedback): Narrow the candidate space.
        set_strategy(kind): Switch the active strategy.
    """

    def __init__(
        self,
        choices: Sequence[Hashable],
        code_length: int,
        *,
        strategy: StrategyKind | str = StrategyKind.NAIVE,
        random_source: RandomSource | None = None,
        minimax_config: MinimaxConfig | None = None,
    ):
        choices = tuple(choices)
        validate_configuration(choices, code_length)

        self.choices = choices
        self.code_length = code_length
        self.total_possibilities = count_permutations(len(choices), code_length)
        self.random_source = random_source or RandomSource(0)
        self.minimax_config = minimax_config or MinimaxConfig()

        self.candidates = CandidateSpace(
            Combination(p) for p in permutations(choices, code_length)
        )

        # full permutation space, only built once minimax is selected
        self._all_combinations: list[Combination] | None = None
        self._all_combinations_key: tuple | None = None

        self.strategy = StrategyKind.NAIVE
        self.set_strategy(strategy)

    def opening_guess(self) -> Combination:
        """
        Fixed first guess: the first half of the pegs (rounded down) use the
        first symbol, the rest use the second one (e.g. 1122).
        """
        half = self.code_length // 2
        second = self.choices[1] if len(self.choices) > 1 else self.choices[0]
        return Combination(
            [self.choices[0]] * half + [second] * (self.code_length - half)
        )

    def next(self) -> Combination:
        """
        Return the next guess to play.

        Raises:
            ExhaustedCandidateSpace: If no candidate is consistent with the
            feedback accepted so far.
        """
        if self.candidates.is_empty():
            raise ExhaustedCandidateSpace(
                "No combination is consistent with the feedback history."
            )
        if len(self.candidates) == 1:
            return self.candidates.first()
        if self.candidates.is_untouched():
            return self.opening_guess()

        return choose_guess(
            self.strategy,
            self.candidates.members(),
            self._all_combinations,
            self.random_source,
            self.minimax_config,
        )

    def accept_feedback(
        self, guess: Combination, feedback: Feedback | tuple[int, int]
    ) -> None:
        """
        Narrow the candidate space by the feedback received for `guess`.

        Raises:
            InvalidFeedback: If the feedback is impossible for this code
            length, or the guess has the wrong length.
        """
        if not isinstance(guess, Combination):
            guess = Combination(guess)
        if len(guess) != self.code_length:
            raise InvalidFeedback(
                f"Guess length must be {self.code_length}, but got {len(guess)}."
            )
        feedback = Feedback(*feedback)
        if not feedback.is_valid_for(self.code_length):
            raise InvalidFeedback(
                f"Feedback {tuple(feedback)} is impossible for "
                f"{self.code_length} pegs."
            )

        self.candidates.narrow(guess, feedback)

    def set_strategy(self, kind: StrategyKind | str) -> None:
        """Switch strategy; minimax also builds the full permutation space once."""
        kind = StrategyKind.parse(kind)
        if kind is StrategyKind.MINIMAX:
            self._ensure_all_combinations()
        self.strategy = kind

    def _ensure_all_combinations(self) -> list[Combination]:
        key = (self.choices, self.code_length)
        if self._all_combinations is None or self._all_combinations_key != key:
            self._all_combinations = [
                Combination(p) for p in permutations(self.choices, self.code_length)
            ]
            self._all_combinations_key = key
        return self._all_combinations

    @property
    def remaining(self) -> int:
        """Number of candidates still consistent with the history."""
        return len(self.candidates)
