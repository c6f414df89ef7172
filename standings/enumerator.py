"""Exhaustive outcome enumeration for pool standings.

Walks every way the undecided games can still finish. At each fully decided
outcome the whole pool is scored and ranked, and only the top rank tiers are
kept. Rank records are merged on the way back up, leaving each bracket's best
possible finish.

The search is exponential in the number of undecided games (two branches per
game), so it is meant for the closing rounds of a tournament.
"""

from tqdm import tqdm

import config
from models.bracket import Bracket, Tournament, get_matchup
from standings.rankings import RankRecord, competition_ranks
from standings.scorer import pool_to_array, score_pool


def count_outcomes(tournament: Tournament) -> int:
    """Number of distinct ways the tournament can still finish."""
    return 2 ** len(tournament.unplayed_games())


def best_ranks(pool, tournament: Tournament, tiers: int = config.TOP_RANKS,
               show_progress: bool = False) -> RankRecord:
    """Best rank every bracket in the pool can still reach.

    Args:
        pool: Iterable of Brackets
        tournament: Current (possibly partial) tournament state
        tiers: Number of rank tiers to keep per outcome (5 keeps ranks 0-4)
        show_progress: Show a progress bar over enumerated outcomes

    Returns:
        RankRecord of brackets that finish in the top tiers in at least one outcome
    """
    brackets = list(pool)
    if not brackets:
        return RankRecord(tiers=tiers)

    pool_arr = pool_to_array(brackets)
    if pool_arr.shape[1] != tournament.width:
        raise ValueError(f"Pool width {pool_arr.shape[1]} does not match tournament width {tournament.width}")

    with tqdm(total=count_outcomes(tournament), desc="Enumerating outcomes",
              disable=not show_progress) as progress:
        return _search(brackets, pool_arr, tournament, tournament.slots, tiers, progress)


def _search(brackets, pool_arr, tournament, table, tiers, progress) -> RankRecord:
    open_slot = _last_open_slot(table)
    if open_slot is None:
        progress.update(1)
        return leaf_ranks(brackets, table, tiers, pool_arr)

    first_round = len(table) // 2
    result = RankRecord(tiers=tiers)
    sides = get_matchup(open_slot)
    bit = 1 << open_slot
    if tournament.mask & bit:
        # Already played; only the recorded winner advances
        sides = (sides[1],) if tournament.decisions & bit else (sides[0],)
    for side in sides:
        # Every higher index is already resolved, so both children are known
        winner = side if open_slot >= first_round else table[side]
        branch = table[:open_slot] + (winner,) + table[open_slot + 1:]
        result = result.merge(_search(brackets, pool_arr, tournament, branch, tiers, progress))
    return result


def _last_open_slot(table) -> int | None:
    for i in range(len(table) - 1, 0, -1):
        if table[i] is None:
            return i
    return None


def leaf_ranks(brackets: list[Bracket], table, tiers: int = config.TOP_RANKS,
               pool_arr=None) -> RankRecord:
    """Rank the pool against one fully decided outcome.

    Brackets are sorted by score (highest first) and given competition ranks;
    only those ranked below `tiers` are recorded.
    """
    if pool_arr is None:
        pool_arr = pool_to_array(brackets)
    record = RankRecord(tiers=tiers)
    if not brackets:
        return record

    scores = score_pool(pool_arr, table)
    order = sorted(range(len(brackets)), key=lambda k: scores[k], reverse=True)
    ranks = competition_ranks([int(scores[k]) for k in order])

    for k, rank in zip(order, ranks):
        if rank >= tiers:
            break
        record.record(brackets[k], rank)
    return record
