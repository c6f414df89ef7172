"""Team data model.

Teams are identified by their starting slot (64-127), the value a
first-round decision resolves to. Within each 16-slot region the seeds
follow SEED_ORDER, so the seed is recoverable from the slot alone.
"""

from dataclasses import dataclass

import config


@dataclass
class Team:
    name: str
    seed: int
    region: str

    def __str__(self):
        return f"({self.seed}) {self.name}"

    def __hash__(self):
        return hash((self.name, self.seed, self.region))

    def __eq__(self, other):
        if not isinstance(other, Team):
            return False
        return self.name == other.name and self.seed == other.seed and self.region == other.region


def seed_for_slot(slot: int) -> int:
    """Seed (1-16) of the team in a starting slot."""
    return config.SEED_ORDER[slot % 16]


def describe_slot(slot: int, field: dict[int, Team] | None = None) -> str:
    """Human-readable label for a team slot, using the field's names when known."""
    if field and slot in field:
        return str(field[slot])
    return f"({seed_for_slot(slot)}) slot {slot}"
