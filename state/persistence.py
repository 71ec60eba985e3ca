# state/persistence.py
import json
from pathlib import Path
from .game_state import GameState


def save_state(game_state: GameState, path: str):
    """
    Save the game state to disk as JSON.
    Args:
        game_state (GameState): The game state to save.
        path (str): The file path to save the game state to.
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(game_state.to_dict(reveal_code=True), f, indent=2)


def load_state(path: str) -> GameState:
    """
    Load the game state from disk.
    Args:
        path (str): The file path to load the game state from.
    Returns:
        GameState: The loaded game state."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    data["rules"] = _restore_rules(data["rules"])
    return GameState.from_dict(data)


def _restore_rules(rules: dict) -> dict:
    # JSON object keys are always strings, map emoji keys back to the symbols
    display = rules.get("display")
    if display and "emoji_map" in display:
        by_name = {str(c): c for c in rules.get("colors", [])}
        display["emoji_map"] = {
            by_name.get(k, k): v for k, v in display["emoji_map"].items()
        }
    return rules


def save_results(results: dict, path: str):
    """
    Save benchmark results to disk as JSON.
    Args:
        results (dict): Benchmark data, see main.run_benchmark.
        path (str): Target file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=2)


def load_results(path: str) -> dict:
    """
    Load benchmark results from disk.
    Args:
        path (str): The benchmark JSON file.
    Returns:
        dict: The benchmark data."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
