"""Unit tests for permutation enumeration and the random source."""

import unittest

from solver.permutations import combination_at, count_permutations, permutations
from solver.random_source import RandomSource, derive_seed


class TestPermutations(unittest.TestCase):

    def test_small_space_in_order(self) -> None:
        self.assertEqual(
            permutations([1, 2, 3], 2),
            [
                (1, 1), (1, 2), (1, 3),
                (2, 1), (2, 2), (2, 3),
                (3, 1), (3, 2), (3, 3),
            ],
        )

    def test_order_follows_alphabet_order(self) -> None:
        self.assertEqual(permutations(["b", "a"], 2)[0], ("b", "b"))
        self.assertEqual(permutations(["b", "a"], 2)[-1], ("a", "a"))

    def test_size_and_uniqueness(self) -> None:
        space = permutations([1, 2, 3, 4, 5, 6], 4)
        self.assertEqual(len(space), 1296)
        self.assertEqual(len(set(space)), 1296)
        self.assertEqual(count_permutations(6, 4), 1296)

    def test_stable_between_calls(self) -> None:
        self.assertEqual(permutations([1, 2, 3], 3), permutations([1, 2, 3], 3))

    def test_non_positive_length(self) -> None:
        self.assertEqual(permutations([1, 2], 0), [])
        self.assertEqual(count_permutations(2, 0), 0)

    def test_combination_at_matches_enumeration(self) -> None:
        space = permutations([1, 2, 3], 3)
        for i, expected in enumerate(space):
            self.assertEqual(combination_at([1, 2, 3], 3, i), expected)
        with self.assertRaises(IndexError):
            combination_at([1, 2, 3], 3, 27)


class TestRandomSource(unittest.TestCase):

    def test_inclusive_bounds(self) -> None:
        source = RandomSource(42)
        draws = {source.next_int(0, 3) for _ in range(500)}
        self.assertEqual(draws, {0, 1, 2, 3})

    def test_same_seed_same_sequence(self) -> None:
        a = RandomSource(7)
        b = RandomSource(7)
        self.assertEqual(
            [a.next_int(1, 100) for _ in range(20)],
            [b.next_int(1, 100) for _ in range(20)],
        )

    def test_reversed_bounds_raise(self) -> None:
        source = RandomSource(1)
        with self.assertRaises(ValueError):
            source.next_int(5, 2)
        self.assertEqual(source.next_int(3, 3), 3)

    def test_derived_seed_gives_another_stream(self) -> None:
        base = RandomSource(3)
        derived = RandomSource(derive_seed(3, "solver"))
        self.assertEqual(derive_seed(3, "solver"), derive_seed(3, "solver"))
        self.assertNotEqual(
            [base.next_int(0, 10**6) for _ in range(5)],
            [derived.next_int(0, 10**6) for _ in range(5)],
        )

    def test_choice(self) -> None:
        self.assertIn(RandomSource(3).choice(["a", "b", "c"]), ["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
