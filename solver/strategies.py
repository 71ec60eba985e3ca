from __future__ import annotations

import enum
import time
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from game.combination import Combination, Feedback
from solver.errors import InvalidConfiguration
from solver.random_source import RandomSource


# drop-in helper for progress and log line
def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def log_print(msg: str) -> None:
    # first terminate the progress line, then print normally
    print("\r\033[K", end="", flush=True)
    print(msg, flush=True)


class StrategyKind(str, enum.Enum):
    """The guess-selection rules a GuessGenerator can switch between."""

    NAIVE = "naive"
    RANDOM = "random"
    MINIMAX = "minimax"

    @classmethod
    def parse(cls, value: StrategyKind | str) -> StrategyKind:
        """Accept a StrategyKind or its name ('naive', 'random', 'minimax')."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(k.value for k in cls)
            raise InvalidConfiguration(
                f"Unknown strategy '{value}'. Allowed: {allowed}."
            ) from None


@dataclass(frozen=True)
class MinimaxConfig:
    # print the running best guess and a progress line while scanning
    progress: bool = False
    progress_interval: float = 2.0
    # on equal worst case, a guess that may itself be the secret wins;
    # off: ties go to the earliest guess in enumeration order
    prefer_candidates: bool = False


def naive_guess(candidates: Sequence[Combination]) -> Combination:
    """First remaining candidate in enumeration order."""
    return candidates[0]


def random_guess(
    candidates: Sequence[Combination], random_source: RandomSource
) -> Combination:
    """Uniformly drawn remaining candidate."""
    return candidates[random_source.next_int(0, len(candidates) - 1)]


class MinimaxSolver:
    """
    Minimax Guess Selection:
    - for every guess in the full permutation space, find the largest
      candidate set any feedback could leave behind (worst case)
    - best_guess = the guess with the smallest worst case
    - early-stop once a guess leaves at most one candidate per feedback,
      nothing can beat that

    Attributes:
        cfg: MinimaxConfig

    Methods:
        choose_guess(...): Selects the best guess using the minimax strategy.
    """

    def __init__(self, config: MinimaxConfig | None = None):
        self.cfg = config or MinimaxConfig()

    @staticmethod
    def evaluate_guess(
        guess: Combination, candidates: Sequence[Combination]
    ) -> tuple[int, Feedback | None]:
        """
        Worst case over all feedbacks for a given guess.

        Grouping the candidates by the feedback the guess would receive gives,
        per feedback, exactly the size of the narrowed candidate set. Feedbacks
        no candidate can produce would leave nothing, so they never raise the
        maximum.

        Args:
            guess: The guess to evaluate.
            candidates: The current candidate space.
        Returns:
            A tuple containing the worst-case count and the feedback causing it.
        """
        partitions = Counter(guess.compare(c) for c in candidates)
        if not partitions:
            return 0, None
        worst_fb, worst_cnt = max(partitions.items(), key=lambda kv: kv[1])
        return worst_cnt, worst_fb

    def choose_guess(
        self,
        candidates: Sequence[Combination],
        all_combinations: Sequence[Combination],
    ) -> tuple[Combination, int, Feedback | None]:
        """
        Choose the best guess using the minimax strategy.
        Args:
            candidates: The combinations still consistent with the history.
            all_combinations: The full permutation space, in enumeration order.
        Returns:
          best_guess, best_worst_case, best_worst_fb
        """
        candidate_set = set(candidates)

        best_guess = None
        best_key = None
        best_minmax_cnt = 0
        best_minmax_fb = None

        start = time.perf_counter()
        last_report = start
        total = len(all_combinations)

        for done, guess in enumerate(all_combinations, start=1):
            minmax_cnt, minmax_fb = self.evaluate_guess(guess, candidates)
            is_candidate = guess in candidate_set

            # lower worst case first, then candidates over non-candidates
            key = (
                minmax_cnt,
                0 if (is_candidate or not self.cfg.prefer_candidates) else 1,
            )

            # New best guess found
            if best_key is None or key < best_key:
                best_guess = guess
                best_key = key
                best_minmax_cnt = minmax_cnt
                best_minmax_fb = minmax_fb

                if self.cfg.progress:
                    log_print(
                        f"Best guess : {best_guess}\n"
                        f"with fb    : {best_minmax_fb}\n"
                        f"min max    : {best_minmax_cnt}\n"
                    )

            # a perfect split that nothing later can beat
            if best_key == (1, 0):
                break

            now = time.perf_counter()
            # periodic progress report
            if self.cfg.progress and now - last_report >= self.cfg.progress_interval:
                rate = done / max(1e-9, (now - start))
                progress_print(
                    f"Progress: {done}/{total} guesses ({rate:.1f} guesses/sec)"
                )
                last_report = now

        return best_guess, best_minmax_cnt, best_minmax_fb


def choose_guess(
    kind: StrategyKind,
    candidates: Sequence[Combination],
    all_combinations: Sequence[Combination] | None,
    random_source: RandomSource,
    minimax_config: MinimaxConfig | None = None,
) -> Combination:
    """
    Produce one guess with the given strategy.

    Args:
        kind: Which strategy to apply.
        candidates: Non-empty candidate space.
        all_combinations: The full permutation space; only minimax reads it.
        random_source: Only the random strategy draws from it.
        minimax_config: Settings for the minimax scan.
    Returns:
        Combination: The chosen guess.
    """
    if kind is StrategyKind.NAIVE:
        return naive_guess(candidates)
    if kind is StrategyKind.RANDOM:
        return random_guess(candidates, random_source)
    if kind is StrategyKind.MINIMAX:
        if all_combinations is None:
            raise InvalidConfiguration(
                "Minimax needs the full permutation space."
            )
        guess, _, _ = MinimaxSolver(minimax_config).choose_guess(
            candidates, all_combinations
        )
        return guess
    raise InvalidConfiguration(f"Unknown strategy '{kind}'.")
