"""Team field loader - names for the 64 team slots.

The field is optional: standings work on slot numbers alone. It only makes
output readable.
"""

import json

import config
from models.team import Team


def load_field_from_json(filepath: str) -> dict[int, Team]:
    """Load team names from a JSON file.

    Expected format:
    {
        "regions": [
            {
                "name": "East",
                "teams": {"1": "Duke", "2": "Alabama", ..., "16": "Norfolk St."}
            },
            ...
        ]
    }

    Returns:
        {team_slot (64-127): Team}
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    field = {}
    for region_idx, region_data in enumerate(data["regions"][:config.NUM_REGIONS]):
        field.update(build_region(region_idx, region_data["name"], region_data["teams"]))

    print(f"Loaded field from {filepath}: {len(field)} teams")
    return field


def build_region(region_idx: int, region_name: str, teams_by_seed: dict) -> dict[int, Team]:
    """Place one region's teams into their starting slots.

    Args:
        region_idx: 0-3
        region_name: e.g. "East"
        teams_by_seed: {seed: team_name} for seeds 1-16 (keys may be strings)
    """
    names = {int(seed): name for seed, name in teams_by_seed.items()}
    base = config.NUM_SLOTS + region_idx * 16
    region = {}
    for pos, seed in enumerate(config.SEED_ORDER):
        if seed in names:
            region[base + pos] = Team(name=names[seed], seed=seed, region=region_name)
    return region
