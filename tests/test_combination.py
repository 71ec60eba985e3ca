"""Unit tests for combinations and feedback comparison."""

import unittest

from game.combination import Combination, Feedback
from solver.permutations import permutations

RED, YELLOW, BLUE = 1, 2, 3


class TestCompare(unittest.TestCase):
    """Tests for Combination.compare."""

    CASES = [
        ([RED], [RED], (1, 0)),
        ([RED], [BLUE], (0, 0)),
        ([RED, YELLOW], [BLUE, RED], (0, 1)),
        ([RED, BLUE], [BLUE, RED], (0, 2)),
        ([RED, RED, YELLOW], [RED, RED, YELLOW], (3, 0)),
        ([RED, YELLOW, RED], [RED, RED, YELLOW], (1, 2)),
        ([RED, YELLOW, RED], [RED, RED, RED], (2, 0)),
        ([RED, RED, RED], [RED, YELLOW, RED], (2, 0)),
        ([RED, YELLOW, BLUE], [YELLOW, BLUE, RED], (0, 3)),
        ([RED, YELLOW, BLUE], [YELLOW, YELLOW, RED], (1, 1)),
        ([RED, YELLOW, BLUE], [BLUE, YELLOW, RED], (1, 2)),
        ([RED, YELLOW, BLUE, YELLOW], [RED, YELLOW, BLUE, BLUE], (3, 0)),
        ([RED, YELLOW, BLUE, YELLOW], [RED, YELLOW, YELLOW, BLUE], (2, 2)),
        ([RED, YELLOW, BLUE, YELLOW], [YELLOW, YELLOW, YELLOW, BLUE], (1, 2)),
    ]

    def test_known_feedbacks(self) -> None:
        for secret, guess, expected in self.CASES:
            with self.subTest(secret=secret, guess=guess):
                fb = Combination(secret).compare(Combination(guess))
                self.assertEqual(fb, Feedback(*expected))

    def test_duplicate_symbols_not_counted_twice(self) -> None:
        fb = Combination([2, 2, 5, 5]).compare(Combination([2, 5, 2, 5]))
        self.assertEqual(fb, (2, 2))
        fb = Combination([1, 1, 1, 2]).compare(Combination([2, 1, 3, 3]))
        self.assertEqual(fb, (1, 1))

    def test_secret_and_guess_from_scenario(self) -> None:
        fb = Combination([2, 6, 1, 1]).compare(Combination([1, 1, 2, 2]))
        self.assertEqual(fb, Feedback(correct=0, misplaced=3))
        fb = Combination([2, 2, 1, 1]).compare(Combination([1, 1, 2, 2]))
        self.assertEqual(fb, Feedback(correct=0, misplaced=4))

    def test_symmetry_and_bounds(self) -> None:
        space = [Combination(p) for p in permutations([1, 2, 3], 3)]
        for a in space:
            self.assertEqual(a.compare(a), (3, 0))
            for b in space:
                fb = a.compare(b)
                self.assertEqual(fb, b.compare(a))
                self.assertTrue(0 <= fb.correct <= 3)
                self.assertTrue(0 <= fb.misplaced <= 3 - fb.correct)

    def test_length_mismatch_raises(self) -> None:
        with self.assertRaises(ValueError):
            Combination([1, 2]).compare(Combination([1, 2, 3]))


class TestCombinationValue(unittest.TestCase):
    """Combinations behave as immutable values."""

    def test_equal_sequences_are_interchangeable(self) -> None:
        a = Combination([1, 1, 2, 2])
        b = Combination((1, 1, 2, 2))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_immutable(self) -> None:
        c = Combination([1, 2])
        with self.assertRaises(AttributeError):
            c.pegs = (3, 4)

    def test_string_forms(self) -> None:
        c = Combination([1, 1, 2, 2])
        self.assertEqual(str(c), "1122")
        self.assertEqual(c.as_list(), [1, 1, 2, 2])
        self.assertEqual(str(Combination([])), "EMPTY")


class TestFeedback(unittest.TestCase):
    """Tests for the Feedback tuple."""

    def test_validity(self) -> None:
        self.assertTrue(Feedback(0, 4).is_valid_for(4))
        self.assertTrue(Feedback(4, 0).is_valid_for(4))
        self.assertFalse(Feedback(3, 2).is_valid_for(4))
        self.assertFalse(Feedback(-1, 0).is_valid_for(4))
        self.assertFalse(Feedback(0, -1).is_valid_for(4))

    def test_win_and_tuple_equality(self) -> None:
        self.assertTrue(Feedback(4, 0).is_win(4))
        self.assertFalse(Feedback(3, 0).is_win(4))
        self.assertEqual(Feedback(1, 2), (1, 2))
        self.assertEqual(str(Feedback(1, 2)), "correct:1 misplaced:2")


if __name__ == "__main__":
    unittest.main()
