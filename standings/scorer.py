"""Bracket scoring.

Scores a decoded bracket against a decoded (real or hypothetical) tournament.
A correct pick earns the round's base points plus the winning team's seed,
so correctly calling an upset is worth more than calling chalk.
"""

from functools import lru_cache

import numpy as np

import config
from models.bracket import get_round
from models.team import seed_for_slot


def _check_tables(picks, actual):
    if len(picks) != len(actual):
        raise ValueError(f"Slot tables differ in width: {len(picks)} vs {len(actual)}")
    if len(picks) < 2 or len(picks) & (len(picks) - 1):
        raise ValueError(f"Invalid slot table width: {len(picks)}")


def pick_points(game_slot: int, team_slot: int, width: int = config.NUM_SLOTS) -> int:
    """Points for correctly picking `team_slot` to win `game_slot`."""
    return config.ROUND_POINTS[get_round(game_slot, width)] + seed_for_slot(team_slot)


def score_bracket(picks, actual) -> int:
    """Score a bracket against tournament results.

    Args:
        picks: Decoded slot table of the prediction
        actual: Decoded slot table of the tournament (None for undecided games)

    Returns:
        Total score
    """
    _check_tables(picks, actual)
    width = len(picks)
    total = 0

    for game_slot in range(1, width):
        picked_team = picks[game_slot]
        actual_team = actual[game_slot]

        if picked_team is not None and actual_team is not None:
            if picked_team == actual_team:
                total += pick_points(game_slot, picked_team, width)

    return total


def score_bracket_by_round(picks, actual) -> dict[int, int]:
    """Score a bracket broken down by round.

    Returns:
        {round_num: points_earned}
    """
    _check_tables(picks, actual)
    width = len(picks)
    by_round = {r: 0 for r in range(1, width.bit_length())}

    for game_slot in range(1, width):
        picked_team = picks[game_slot]
        if picked_team is not None and picked_team == actual[game_slot]:
            by_round[get_round(game_slot, width)] += pick_points(game_slot, picked_team, width)

    return by_round


def max_possible_score(picks, actual) -> int:
    """Best score still reachable given the results so far.

    Adds the points of every undecided game whose picked team has not yet
    lost on its way there.
    """
    total = score_bracket(picks, actual)
    width = len(picks)

    for game_slot in range(1, width):
        team = picks[game_slot]
        if team is None or actual[game_slot] is not None:
            continue
        if _still_alive(team, game_slot, actual):
            total += pick_points(game_slot, team, width)

    return total


def _still_alive(team: int, game_slot: int, actual) -> bool:
    # Walk the team's path from its first game up to (not including) game_slot
    g = team // 2
    while g > game_slot:
        if actual[g] is not None and actual[g] != team:
            return False
        g //= 2
    return True


_SEEDS = np.array(config.SEED_ORDER, dtype=np.int64)


@lru_cache(maxsize=None)
def _round_points(width: int) -> np.ndarray:
    """Base points per game index; index 0 scores nothing."""
    points = np.zeros(width, dtype=np.int64)
    for game_slot in range(1, width):
        points[game_slot] = config.ROUND_POINTS[get_round(game_slot, width)]
    return points


def slots_to_array(slots) -> np.ndarray:
    """Convert a slot table to an int array, 0 standing in for None."""
    return np.array([0 if s is None else s for s in slots], dtype=np.int64)


def pool_to_array(brackets) -> np.ndarray:
    """Stack the decoded tables of many brackets into an (n, width) array."""
    brackets = list(brackets)
    if not brackets:
        return np.zeros((0, config.NUM_SLOTS), dtype=np.int64)
    return np.stack([slots_to_array(b.slots) for b in brackets])


def score_pool(pool: np.ndarray, actual) -> np.ndarray:
    """Score every row of a pool array against one tournament table at once.

    Team slots are never 0 (they start at width), so 0 safely marks an
    unresolved game on either side.
    """
    actual_arr = actual if isinstance(actual, np.ndarray) else slots_to_array(actual)
    width = actual_arr.shape[0]
    if pool.shape[1] != width:
        raise ValueError(f"Pool width {pool.shape[1]} does not match tournament width {width}")

    seeds = _SEEDS[actual_arr % 16]
    game_points = np.where(actual_arr > 0, _round_points(width) + seeds, 0)

    hits = pool == actual_arr
    return (hits * game_points).sum(axis=1)
