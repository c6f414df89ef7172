"""Rank records: each bracket's best achievable finish.

A rank record maps a Bracket to the lowest (best) rank tier it reached in any
enumerated outcome. Records from sibling outcomes are merged by keeping the
minimum rank per bracket.
"""

from __future__ import annotations

import config
from models.bracket import Bracket


def competition_ranks(scores: list[int]) -> list[int]:
    """Rank scores already sorted from highest to lowest.

    Tied scores share a rank, and the next distinct score resumes at its
    position in the list: [50, 50, 40, 30, 30, 30] -> [0, 0, 2, 3, 3, 3].
    """
    ranks = []
    for i, score in enumerate(scores):
        if i > 0 and score == scores[i - 1]:
            ranks.append(ranks[-1])
        else:
            ranks.append(i)
    return ranks


class RankRecord:
    """Best rank per bracket across the outcomes seen so far."""

    def __init__(self, ranks: dict[Bracket, int] | None = None, tiers: int = config.TOP_RANKS):
        self.ranks: dict[Bracket, int] = dict(ranks or {})
        self.tiers = tiers

    def record(self, bracket: Bracket, rank: int):
        """Note that `bracket` finished at `rank`, keeping the better of old and new."""
        current = self.ranks.get(bracket)
        if current is None or rank < current:
            self.ranks[bracket] = rank

    def merge(self, other: RankRecord) -> RankRecord:
        """Combine two records, keeping the minimum rank for every bracket in either."""
        merged = RankRecord(self.ranks, max(self.tiers, other.tiers))
        for bracket, rank in other.ranks.items():
            merged.record(bracket, rank)
        return merged

    def rankings(self) -> list[list[Bracket]]:
        """Group brackets by rank tier, best tier first."""
        tiers: list[list[Bracket]] = [[] for _ in range(self.tiers)]
        for bracket, rank in self.ranks.items():
            if rank < self.tiers:
                tiers[rank].append(bracket)
        return tiers

    def best_rank(self, bracket: Bracket) -> int | None:
        return self.ranks.get(bracket)

    def __contains__(self, bracket):
        return bracket in self.ranks

    def __len__(self):
        return len(self.ranks)

    def __eq__(self, other):
        if not isinstance(other, RankRecord):
            return NotImplemented
        return self.ranks == other.ranks

    def __repr__(self):
        return f"RankRecord({self.ranks!r})"


def merge(a: RankRecord, b: RankRecord) -> RankRecord:
    """Merge two rank records (per-bracket minimum over the union of keys)."""
    return a.merge(b)
