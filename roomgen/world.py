import random
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import TextureCatalog, assign_textures
from .config import GenerationConfig
from .creatures import Creature
from .generator import generate
from .grid import Grid
from .tiles import TileType

# Tiles a creature can stand on
WALKABLE_TYPES = frozenset(
    {TileType.FLOOR, TileType.CORRIDOR, TileType.ENTRANCE, TileType.EXIT}
)


@dataclass
class WorldState:
    """A generated map together with everything living on it."""

    terrain: Grid
    creatures: List[Creature] = field(default_factory=list)

    @property
    def player(self) -> Optional[Creature]:
        for creature in self.creatures:
            if creature.tile_kind.tile_type == TileType.PLAYER:
                return creature
        return None

    @property
    def enemies(self) -> List[Creature]:
        return [c for c in self.creatures if c.tile_kind.tile_type == TileType.ENEMY]

    def creature_at(self, x: int, y: int) -> Optional[Creature]:
        for creature in self.creatures:
            if creature.position == (x, y):
                return creature
        return None

    def is_tile_walkable(self, x: int, y: int) -> bool:
        """Check if the terrain at (x, y) can be walked on."""
        if not self.terrain.in_bounds(x, y):
            return False
        return self.terrain[x, y].tile_type in WALKABLE_TYPES


def create_random_world(
    config: Optional[GenerationConfig] = None,
    seed: Optional[int] = None,
    catalog: Optional[TextureCatalog] = None,
) -> WorldState:
    """
    Factory function to create a randomly generated world.

    Parameters:
        config: Generation parameters (defaults to GenerationConfig())
        seed: Seed for the random source; None seeds from system entropy
        catalog: If given, texture indexes are assigned from it

    Returns:
        A WorldState with the generated terrain and creatures
    """
    config = config or GenerationConfig()
    rng = random.Random(seed)

    print(
        f"Generating world: {config.room_count} rooms on a "
        f"{config.map_width}x{config.map_height} map...",
        file=sys.stderr,
    )
    terrain, creatures = generate(config, rng)

    if catalog is not None:
        assign_textures(terrain, creatures, catalog, rng)

    return WorldState(terrain=terrain, creatures=creatures)
