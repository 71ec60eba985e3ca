from .combination import Combination, Feedback
from .ruleset import DEFAULT_RULES


class Guess:
    """
        Represents a single guess played on the board.
    Attributes:
        sequence (list): The guessed sequence of symbols.
        rules (dict): The ruleset for validation.
        feedback (Feedback | None): Feedback once the guess was evaluated.
        is_valid (bool): Whether the guess is valid according to the rules."""

    def __init__(self, sequence, rules=None):
        """
        Initialize a Guess instance.
        Args:
            sequence (list | str | Combination | None): The guessed sequence.
                Strings are read one character per peg, spaces ignored.
            rules (dict, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
        """
        self.rules = rules or DEFAULT_RULES

        # --- Input normalization ---
        if isinstance(sequence, str):
            self.sequence = [self._parse_symbol(c) for c in sequence.replace(" ", "")]
        elif sequence is None:
            self.sequence = []
        else:
            self.sequence = list(sequence)

        # --- Attribute setup ---
        self.feedback = None
        self.is_valid = False

        # --- Validation ---
        if self.sequence:
            self.is_valid = self.validate(strict=False)

    def _parse_symbol(self, char: str):
        """Map one typed character onto a symbol of the ruleset."""
        for color in self.rules["colors"]:
            if str(color) == char:
                return color
        return char

    def validate(self, strict: bool = True):
        """
        Check if the guess follows the rules (length, valid symbols).

        Args:
            strict (bool): If True, raise ValueError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """

        def fail(msg: str) -> bool:
            if strict:
                raise ValueError(msg)
            return False

        # Length check
        if len(self.sequence) != self.rules["code_length"]:
            return fail(
                f"Code length must be {self.rules['code_length']}, "
                f"but got {len(self.sequence)}."
            )

        # Symbol check
        for color in self.sequence:
            if color not in self.rules["colors"]:
                allowed = ", ".join(str(c) for c in self.rules["colors"])
                return fail(f"Invalid color '{color}'. Allowed: {allowed}.")

        return True

    def apply_feedback(self, feedback):
        """
        Store feedback after evaluation by the Board.
        Args:
            feedback (tuple[int, int]): (correct, misplaced)
        """
        self.feedback = Feedback(*feedback)

    def get_feedback(self):
        """
        Return the stored feedback, or None before evaluation.
        Returns:
            Feedback | None
        """
        return self.feedback

    def get_guess(self):
        """
        Return the stored guess.

        Returns:
            list: The guess sequence."""
        return self.sequence

    def as_combination(self) -> Combination:
        return Combination(self.sequence)

    def as_string(self):
        return self.as_combination().as_string()

    def __str__(self):
        return self.as_string()
