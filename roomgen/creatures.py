from dataclasses import dataclass
from typing import Tuple

from .random_source import RandomSource, rand_range
from .tiles import TileKind

# Stat draws as (minimum, span): values fall in [minimum, minimum + span)
HEALTH_RANGE = (48, 13)
STRENGTH_RANGE = (5, 11)
DEFENSE_RANGE = (0, 6)
STARTING_LEVEL = 0
STARTING_EXPERIENCE = 1


@dataclass
class Creature:
    """Something alive on the map: the player or an enemy."""

    tile_kind: TileKind
    position: Tuple[int, int]
    health: int
    strength: int
    defense: int
    level: int = STARTING_LEVEL
    experience: int = STARTING_EXPERIENCE
    texture_index: int = 0

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]


def spawn_creature(kind: TileKind, x: int, y: int, rng: RandomSource) -> Creature:
    """Create a creature at (x, y) with freshly rolled stats."""
    if not kind.is_entity:
        raise ValueError(f"{kind.name} is not a creature tile")
    return Creature(
        tile_kind=kind,
        position=(x, y),
        health=rand_range(rng, *HEALTH_RANGE),
        strength=rand_range(rng, *STRENGTH_RANGE),
        defense=rand_range(rng, *DEFENSE_RANGE),
    )
