from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Iterable, NamedTuple


class Feedback(NamedTuple):
    """
    Result of comparing two combinations.

    Attributes:
        correct (int): Pegs with the right symbol in the right position.
        misplaced (int): Pegs with the right symbol in the wrong position.
    """

    correct: int
    misplaced: int

    def is_valid_for(self, length: int) -> bool:
        """
        Check whether this feedback can describe a combination of `length`.

        Args:
            length (int): The combination length.
        Returns:
            bool: True if both counts are non-negative and sum to at most
            `length`.
        """
        return (
            self.correct >= 0
            and self.misplaced >= 0
            and self.correct + self.misplaced <= length
        )

    def is_win(self, length: int) -> bool:
        """Return True if every peg of a `length`-long code is correct."""
        return self.correct == length

    def __str__(self):
        return f"correct:{self.correct} misplaced:{self.misplaced}"


@dataclass(frozen=True)
class Combination:
    """
    Immutable, fixed-length sequence of symbols.

    Two combinations holding equal sequences are equal and hash alike, so
    they can be used as dict keys and set members.

    Attributes:
        pegs (tuple): The symbols, in position order.
    """

    pegs: tuple

    def __init__(self, pegs: Iterable[Hashable]):
        object.__setattr__(self, "pegs", tuple(pegs))

    def compare(self, other: Combination) -> Feedback:
        """
        Compute Mastermind feedback between this combination and `other`.

        Args:
            other (Combination): A combination of the same length.

        Returns:
            Feedback: (correct, misplaced)
            correct: positions holding the same symbol in both,
            misplaced: symbols shared by both outside those positions.

        Notes:
            Exact matches are removed before counting misplaced pegs, and the
            misplaced count is the sum over symbols of the smaller of the two
            remaining frequencies, so repeated symbols are never counted twice.
            The result does not depend on the argument order.
        """
        if len(self.pegs) != len(other.pegs):
            raise ValueError(
                f"Cannot compare combinations of length {len(self.pegs)} "
                f"and {len(other.pegs)}."
            )

        correct = 0
        mine = Counter()
        theirs = Counter()
        for a, b in zip(self.pegs, other.pegs):
            if a == b:
                correct += 1
            else:
                mine[a] += 1
                theirs[b] += 1

        # Counter intersection keeps min(mine[c], theirs[c]) per symbol
        misplaced = sum((mine & theirs).values())
        return Feedback(correct, misplaced)

    def __len__(self):
        return len(self.pegs)

    def __iter__(self):
        return iter(self.pegs)

    def __getitem__(self, index):
        return self.pegs[index]

    def as_list(self) -> list:
        return list(self.pegs)

    def as_string(self) -> str:
        """
        Return a compact representation of the combination (e.g. '1122').
        Returns:
            str: The symbols joined together, or 'EMPTY'.
        """
        return "".join(str(p) for p in self.pegs) if self.pegs else "EMPTY"

    def __str__(self):
        return self.as_string()
