"""Bracket data structures and the decision bitmask codec.

A tournament outcome is stored as two integers rather than a slot array:
- decisions: bit i (1-63) is 1 if the higher-numbered (right) side of game i
  advanced, 0 if the lower-numbered (left) side did
- mask: bit i (1-63) is 1 if game i has been decided

The games form a binary tree in heap order (index 0 unused):
- Index 1: championship game
- Index 2-3: semifinal games (Final Four)
- Index 4-7: regional finals (Elite Eight)
- ...
- Index 32-63: Round of 64

Children of game i are 2*i and 2*i+1. A first-round game i chooses between the
starting slots 2*i and 2*i+1 (64-127), and that slot number is the team's
identity for the rest of the tournament. Later games inherit the identity of
whichever child game the decision points at.

Decoding turns (mask, decisions) into a 64-entry table of team slots, with
None wherever the winner is not yet known.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

import config


def complete_mask(width: int = config.NUM_SLOTS) -> int:
    """Mask with every game of a `width`-slot tree settled."""
    if width == config.NUM_SLOTS:
        return config.COMPLETE_MASK
    return ((1 << width) - 1) & ~1


def get_round(game_slot: int, width: int = config.NUM_SLOTS) -> int:
    """Get the round number for a game slot.

    Round 6 = championship (slot 1)
    Round 5 = Final Four (slots 2-3)
    Round 4 = Elite Eight (slots 4-7)
    Round 3 = Sweet 16 (slots 8-15)
    Round 2 = Round of 32 (slots 16-31)
    Round 1 = Round of 64 (slots 32-63)
    """
    if game_slot < 1 or game_slot >= width:
        raise ValueError(f"Invalid game slot: {game_slot}")
    r = 0
    s = game_slot
    while s >= 1:
        r += 1
        s //= 2
    # r is the depth from root +1; the deepest games are round 1
    return width.bit_length() - r


def get_matchup(game_slot: int) -> tuple[int, int]:
    """Get the two child slot indices that feed into this game."""
    return 2 * game_slot, 2 * game_slot + 1


def get_all_game_slots_for_round(round_num: int, width: int = config.NUM_SLOTS) -> list[int]:
    """Get all game slot indices for a given round."""
    rounds = width.bit_length() - 1
    if round_num < 1 or round_num > rounds:
        return []
    start = 1 << (rounds - round_num)
    return list(range(start, 2 * start))


def _check_bits(value: int, name: str, width: int):
    if value < 0 or value & ~complete_mask(width):
        raise ValueError(f"{name} has bits outside games 1-{width - 1}: {value:#x}")


def decode_slots(mask: int, decisions: int, width: int = config.NUM_SLOTS) -> tuple[int | None, ...]:
    """Resolve every settled game to the team slot projected to win it.

    Games are processed from the deepest (highest index) to the championship,
    so a child is always resolved before its parent. A later-round game stays
    None until both of its child games are resolved.
    """
    _check_bits(mask, "mask", width)
    _check_bits(decisions, "decisions", width)

    first_round = width // 2
    res: list[int | None] = [None] * width
    for i in range(width - 1, 0, -1):
        bit = 1 << i
        if not mask & bit:
            continue
        position = 2 * i + (1 if decisions & bit else 0)
        if i >= first_round:
            res[i] = position
        elif res[2 * i] is not None and res[2 * i + 1] is not None:
            res[i] = res[position]

    return tuple(res)


def encode_slots(slots) -> tuple[int, int]:
    """Inverse of decode_slots: recover (mask, decisions) from a winners table."""
    width = len(slots)
    first_round = width // 2
    mask = 0
    decisions = 0
    for i in range(1, width):
        team = slots[i]
        if team is None:
            continue
        left, right = get_matchup(i)
        if i < first_round:
            left, right = slots[left], slots[right]
        if team == left:
            mask |= 1 << i
        elif team == right:
            mask |= 1 << i
            decisions |= 1 << i
        else:
            raise ValueError(f"Slot {team} cannot have won game {i}")
    return mask, decisions


def _parse_int(value) -> int:
    if isinstance(value, str):
        try:
            return int(value, 0)
        except ValueError:
            raise ValueError(f"Invalid bitmask: {value!r}") from None
    return int(value)


@dataclass(frozen=True)
class Bracket:
    """A fully decided 63-game prediction (or final result).

    Equality and hashing use the decisions bitmask only, so a Bracket can key
    a rank record.
    """

    decisions: int
    width: int = field(default=config.NUM_SLOTS, compare=False)

    def __post_init__(self):
        _check_bits(self.decisions, "decisions", self.width)

    @classmethod
    def from_value(cls, value, width: int = config.NUM_SLOTS) -> Bracket:
        """Build from an int or an int-like string ("0x..." or decimal)."""
        return cls(_parse_int(value), width)

    @classmethod
    def from_slots(cls, slots) -> Bracket:
        """Build from a fully resolved winners table."""
        mask, decisions = encode_slots(slots)
        if mask != complete_mask(len(slots)):
            raise ValueError("Winners table is missing games")
        return cls(decisions, len(slots))

    @property
    def mask(self) -> int:
        return complete_mask(self.width)

    @cached_property
    def slots(self) -> tuple[int | None, ...]:
        return decode_slots(self.mask, self.decisions, self.width)

    @property
    def champion(self) -> int:
        return self.slots[1]

    def __repr__(self):
        return f"Bracket({self.decisions:#x})"


@dataclass(frozen=True)
class Tournament:
    """A partially decided tournament: the real results so far."""

    decisions: int = 0
    mask: int = 0
    width: int = field(default=config.NUM_SLOTS, compare=False)

    def __post_init__(self):
        _check_bits(self.mask, "mask", self.width)
        _check_bits(self.decisions, "decisions", self.width)
        if self.decisions & ~self.mask:
            # Decisions for unplayed games are meaningless
            object.__setattr__(self, "decisions", self.decisions & self.mask)

    @classmethod
    def from_values(cls, decisions, mask, width: int = config.NUM_SLOTS) -> Tournament:
        return cls(_parse_int(decisions), _parse_int(mask), width)

    @cached_property
    def slots(self) -> tuple[int | None, ...]:
        return decode_slots(self.mask, self.decisions, self.width)

    def with_result(self, game_slot: int, decision: int) -> Tournament:
        """Return a new Tournament with one more game decided."""
        if game_slot < 1 or game_slot >= self.width:
            raise ValueError(f"Invalid game slot: {game_slot}")
        if decision not in (0, 1):
            raise ValueError(f"Decision must be 0 or 1, got {decision}")
        bit = 1 << game_slot
        decisions = (self.decisions & ~bit) | (bit if decision else 0)
        return Tournament(decisions, self.mask | bit, self.width)

    def open_games(self) -> list[int]:
        """Game slots whose winner is still unknown, highest index first."""
        return [i for i in range(self.width - 1, 0, -1) if self.slots[i] is None]

    def unplayed_games(self) -> list[int]:
        """Open games with no recorded result, highest index first.

        An open game can still be settled: its result waits on an unplayed
        game below it.
        """
        return [i for i in self.open_games() if not self.mask & (1 << i)]

    def is_complete(self) -> bool:
        return not self.open_games()

    def to_bracket(self) -> Bracket:
        if not self.is_complete():
            raise ValueError("Tournament still has undecided games")
        return Bracket.from_slots(self.slots)
