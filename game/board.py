from .combination import Combination, Feedback
from .guess import Guess
from .ruleset import DEFAULT_RULES
from solver.permutations import combination_at, count_permutations
from solver.random_source import RandomSource
from state.game_state import GameState
from state.persistence import load_state, save_state


class Board:
    """Main game board class: manages gameplay, secret code, and guess history."""

    def __init__(self, rules=None, random_source=None):
        """Initialize the board with a given ruleset."""
        self.rules = rules or DEFAULT_RULES
        self.random_source = random_source or RandomSource(self.rules.get("seed"))
        self.secret_code = None
        self.guesses = []
        self.current_attempt = 0
        self.max_attempts = self.rules.get("max_attempts", 10)
        self.is_over = False
        self.is_won = False

    def initialize_game(self, secret=None):
        """
        Set up a new game and reset state.

        Args:
            secret (optional): Explicit secret; drawn uniformly from all
            possible codes when omitted.
        """
        if secret is None:
            secret = self.generate_secret()
        secret = Guess(list(secret), rules=self.rules)
        secret.validate(strict=True)
        self.secret_code = secret.as_combination()
        self.guesses = []
        self.current_attempt = 0
        self.is_over = False
        self.is_won = False

    def generate_secret(self) -> Combination:
        """Draw one code uniformly from the permutation space."""
        colors = self.rules["colors"]
        length = self.rules["code_length"]
        index = self.random_source.next_int(
            0, count_permutations(len(colors), length) - 1
        )
        return Combination(combination_at(colors, length, index))

    def make_guess(self, guess_input):
        """
        Create a Guess object from input, evaluate it, and update state.

        Returns:
            Feedback | None: The feedback, or None if the guess was invalid.
        """

        # Create new guess
        new_guess = Guess(guess_input, rules=self.rules)

        # Check if new guess is false
        if not new_guess.is_valid:
            print("Invalid input. Try again.")
            return None

        # Calculate feedback
        feedback = self.secret_code.compare(new_guess.as_combination())
        new_guess.apply_feedback(feedback)

        # Save feedback
        self.guesses.append(new_guess)

        # Increase attempts
        self.current_attempt += 1

        # Validate win/lose
        self.check_game_over()
        return feedback

    def play_solver(self, solver, on_turn=None):
        """
        Let a code breaker play until the game is over.

        Args:
            solver: Anything with next() and accept_feedback(guess, feedback),
                e.g. a GuessGenerator or a SolverWorker.
            on_turn (callable, optional): Called as on_turn(attempt, guess,
                feedback) after every guess.
        Returns:
            bool: True if the code was cracked.
        """
        while not self.is_over:
            guess = solver.next()
            feedback = self.make_guess(guess.as_list())
            if feedback is None:
                raise ValueError(f"Solver produced an invalid guess: {guess}")
            if on_turn is not None:
                on_turn(self.current_attempt, guess, feedback)
            if self.is_over:
                break
            solver.accept_feedback(guess, feedback)
        return self.is_won

    def get_feedback_history(self):
        """Return the full history of guesses and feedback."""
        return [(g.as_combination(), g.get_feedback()) for g in self.guesses]

    def check_game_over(self):
        """Check if the game is finished (win or all attempts used)."""
        last_guess = self.guesses[-1]
        if last_guess.get_feedback().is_win(self.rules["code_length"]):
            self.is_over = True
            self.is_won = True
            return

        if self.remaining_attempts() <= 0:
            self.is_over = True

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def reset(self):
        """Reset the board for a new game with the same rules."""
        self.initialize_game()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def get_current_state(self):
        """Return a GameState snapshot for saving or analysis."""
        return GameState(
            rules=self.rules,
            guesses=[g for g in self.guesses],
            current_attempts=self.current_attempt,
            is_over=self.is_over,
            is_won=self.is_won,
            code=self.secret_code.as_list() if self.secret_code else None,
        )

    def save(self, filename="game_state.json"):
        save_state(self.get_current_state(), filename)

    @classmethod
    def from_file(cls, filename):
        state = load_state(filename)
        board = cls(rules=state.rules)
        board.guesses = []
        for g in state.guesses:
            guess_obj = Guess(g["guess"], rules=board.rules)
            guess_obj.apply_feedback(Feedback(*g["feedback"]))
            board.guesses.append(guess_obj)
        board.current_attempt = state.current_attempts
        board.is_over = state.is_over
        board.is_won = state.is_won
        board.secret_code = (
            Combination(state.secret_code) if state.secret_code else None
        )
        return board

    def render(self):
        """Render a text-based representation of the board (for CLI)."""

        display = self.rules["display"]
        emoji = display["emoji_map"]
        length = self.rules["code_length"]
        # one cell per guess peg plus one per feedback peg
        width = 2 * length
        title = " Mastermind "
        line = "+----" * width + "+"
        inner = len(line) - 2

        # build the gameboard
        print(line)
        print("|" + title.center(inner, "+") + "|")
        print(line)
        half = inner // 2
        print("|" + " Guesses ".center(half, "+") + "|" + " Feedback ".center(inner - half - 1, "+") + "|")
        print(line)
        for guess in self.guesses:
            attempt_line = ""
            for c in guess.get_guess():
                symbol = emoji.get(c, str(c))
                attempt_line += "| " + symbol + " "
            correct, misplaced = guess.get_feedback()
            for i in range(correct):
                attempt_line += "| " + display["correct_peg"] + " "
            for i in range(misplaced):
                attempt_line += "| " + display["misplaced_peg"] + " "
            for i in range(max(0, length - correct - misplaced)):
                attempt_line += "|    "
            print(attempt_line + "|")
            print(line)
