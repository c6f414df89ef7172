"""Pool and tournament state loaders.

Brackets and tournament states are stored as JSON bitmasks. Values may be
JSON integers or strings ("0x..." hex or decimal), since 63-bit masks are
easier to read and copy as hex.
"""

import json
import os

from models.bracket import Bracket, Tournament


def load_pool_from_json(filepath: str) -> dict[str, Bracket]:
    """Load a bracket pool from a JSON file.

    Expected format:
    {
        "brackets": {
            "Alice": "0x5a3f...",
            "Bob": 1234567890,
            ...
        }
    }
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    pool = {name: Bracket.from_value(value) for name, value in data["brackets"].items()}
    print(f"Loaded {len(pool)} brackets from {filepath}")
    return pool


def load_tournament_from_json(filepath: str) -> Tournament:
    """Load the current tournament state.

    Expected format:
    {"decisions": "0x...", "mask": "0x..."}
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    tournament = Tournament.from_values(data.get("decisions", 0), data["mask"])
    decided = tournament.width - 1 - len(tournament.open_games())
    print(f"Loaded tournament from {filepath}: {decided} of {tournament.width - 1} games decided")
    return tournament


def save_tournament_to_json(tournament: Tournament, filepath: str):
    """Save a tournament state to JSON."""
    data = {"decisions": f"{tournament.decisions:#x}", "mask": f"{tournament.mask:#x}"}

    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    print(f"Saved tournament to {filepath}")
