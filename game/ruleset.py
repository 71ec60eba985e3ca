# Configuration: symbols, code length, attempts, solver strategy, etc.
DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "num_colors": 6,  # Available symbols (see color set below)
    "max_attempts": 10,  # Number of guesses per game
    "colors": [1, 2, 3, 4, 5, 6],  # Symbols, in enumeration order
    "strategy": "naive",  # CPU guess strategy: naive | random | minimax
    "seed": None,  # Seed for secrets and the random strategy (None = clock)
    "display": {
        "emoji_map": {  # Optional, for CLI rendering
            1: "🔴",
            2: "🟢",
            3: "🔵",
            4: "🟡",
            5: "🟠",
            6: "🟣",
        },
        "correct_peg": "⚫",
        "misplaced_peg": "⚪",
    },
}


def make_rules(code_length=None, num_colors=None, **overrides):
    """
    Derive a ruleset from DEFAULT_RULES.

    Args:
        code_length (int, optional): Pegs per code.
        num_colors (int, optional): Size of the alphabet; symbols are 1..num_colors.
        **overrides: Any other top-level rule to replace.
    Returns:
        dict: A new ruleset; DEFAULT_RULES is left untouched.
    """
    rules = dict(DEFAULT_RULES)
    rules["display"] = dict(DEFAULT_RULES["display"])
    if code_length is not None:
        rules["code_length"] = code_length
    if num_colors is not None:
        rules["num_colors"] = num_colors
        rules["colors"] = list(range(1, num_colors + 1))
    rules.update(overrides)
    return rules
