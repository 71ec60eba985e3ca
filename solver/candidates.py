from __future__ import annotations

from typing import Iterable

from game.combination import Combination, Feedback


def narrow_candidates(
    candidates: Iterable[Combination],
    guess: Combination,
    feedback: Feedback | tuple[int, int],
) -> list[Combination]:
    """
    Keep only the candidates that would have produced `feedback` for `guess`.

    Args:
        candidates: The current candidate space, in enumeration order.
        guess: The guess the feedback belongs to.
        feedback: (correct, misplaced) received for the guess.
    Returns:
        list[Combination]: The surviving candidates, order preserved.
    """
    feedback = Feedback(*feedback)
    return [c for c in candidates if guess.compare(c) == feedback]


def possible_feedbacks(code_length: int) -> list[Feedback]:
    """
    All (correct, misplaced) pairs that can actually come out of a comparison.

    (n - 1, 1) is left out: if every peg but one is exact, the last one
    cannot be misplaced.

    Args:
        code_length: The combination length n.
    Returns:
        list[Feedback]: Outcomes ordered by correct, then misplaced.
    """
    return [
        Feedback(b, w)
        for b in range(code_length + 1)
        for w in range(code_length + 1 - b)
        if not (b == code_length - 1 and w == 1)
    ]


class CandidateSpace:
    """
    The combinations still consistent with every feedback accepted so far.

    Narrowing only ever removes members. An empty space means the feedback
    history contradicts itself.

    Attributes:
        initial_size (int): Size of the space before any narrowing.
    """

    def __init__(self, combinations: Iterable[Combination]):
        self._members = list(combinations)
        self.initial_size = len(self._members)

    def narrow(self, guess: Combination, feedback: Feedback) -> None:
        """Drop every member inconsistent with (guess, feedback)."""
        self._members = narrow_candidates(self._members, guess, feedback)

    def first(self) -> Combination:
        return self._members[0]

    def members(self) -> list[Combination]:
        """Return a copy of the current members, in enumeration order."""
        return list(self._members)

    def is_untouched(self) -> bool:
        """True while no narrowing has removed anything."""
        return len(self._members) == self.initial_size

    def is_empty(self) -> bool:
        return not self._members

    def __len__(self):
        return len(self._members)

    def __iter__(self):
        return iter(self._members)

    def __getitem__(self, index):
        return self._members[index]

    def __contains__(self, combination):
        return combination in self._members
