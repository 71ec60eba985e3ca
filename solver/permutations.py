from __future__ import annotations

from itertools import product
from typing import Hashable, Sequence


def permutations(choices: Sequence[Hashable], length: int) -> list[tuple]:
    """
    Enumerate every ordered sequence of `length` symbols drawn from `choices`
    (repetition allowed).

    The order is fixed: the sequence is read as a base-k numeral where the
    first position is the most significant digit and the digit values follow
    the order of `choices`. For choices [1, 2, 3] and length 2 this yields
    (1, 1), (1, 2), (1, 3), (2, 1), ... (3, 3).

    Args:
        choices: The alphabet, in the order used for enumeration.
        length: Number of positions per sequence.
    Returns:
        list[tuple]: All len(choices) ** length sequences.
    """
    if length <= 0:
        return []
    return list(product(choices, repeat=length))


def count_permutations(num_choices: int, length: int) -> int:
    """Size of the permutation space for k symbols and n positions."""
    return num_choices**length if length > 0 else 0


def combination_at(choices: Sequence[Hashable], length: int, index: int) -> tuple:
    """
    Return the sequence at position `index` of `permutations(choices, length)`
    without building the whole space.

    Args:
        choices: The alphabet, in enumeration order.
        length: Number of positions per sequence.
        index: Position in [0, len(choices) ** length - 1].
    Returns:
        tuple: The sequence at that position.
    """
    base = len(choices)
    if not 0 <= index < count_permutations(base, length):
        raise IndexError(f"Index {index} outside the permutation space.")
    digits = []
    for _ in range(length):
        index, digit = divmod(index, base)
        digits.append(choices[digit])
    return tuple(reversed(digits))
