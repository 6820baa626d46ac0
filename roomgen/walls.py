"""
Wall connectivity.

Runs once the map is fully composited. Walls that ended up with no floor or
corridor anywhere in their 8-neighbourhood are removed; the remaining walls
learn which cardinal neighbours are walls too, so a tile set can pick the
right straight, corner or junction texture.
"""

import numpy as np

from .grid import Grid
from .tiles import (
    NONE,
    WALL_MAKING_TYPES,
    WALL_SHIFT,
    TileKind,
    TileType,
    WallSide,
)

# (side, dx, dy); north is towards row 0
CARDINAL_NEIGHBOURS = (
    (WallSide.NORTH, 0, -1),
    (WallSide.SOUTH, 0, 1),
    (WallSide.EAST, 1, 0),
    (WallSide.WEST, -1, 0),
)

ALL_NEIGHBOURS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)

DEFAULT_WALL_SIDES = WallSide.EAST | WallSide.WEST


def _neighbour(mask: np.ndarray, dx: int, dy: int) -> np.ndarray:
    """out[y, x] = mask[y + dy, x + dx], False where that falls off the grid."""
    height, width = mask.shape
    padded = np.pad(mask, 1, constant_values=False)
    return padded[1 + dy : 1 + dy + height, 1 + dx : 1 + dx + width]


def connect_walls(grid: Grid) -> int:
    """
    Prune orphan walls and set connection flags on the rest, in place.

    Returns:
        The number of walls removed.
    """
    types = grid.types()
    walls = types == TileType.WALL
    makers = np.isin(types, [int(t) for t in WALL_MAKING_TYPES])

    near_maker = np.zeros_like(walls)
    for dx, dy in ALL_NEIGHBOURS:
        near_maker |= _neighbour(makers, dx, dy)

    survivors = walls & near_maker
    orphans = walls & ~near_maker

    sides = np.zeros(types.shape, dtype=grid.tiles.dtype)
    for side, dx, dy in CARDINAL_NEIGHBOURS:
        sides[_neighbour(survivors, dx, dy)] |= int(side)

    grid.tiles[survivors] = int(TileType.WALL) | (sides[survivors] << WALL_SHIFT)
    grid.tiles[orphans] = NONE.code
    return int(np.count_nonzero(orphans))


def repair_tile(kind: TileKind) -> TileKind:
    """A wall with no connections becomes a plain east-west wall."""
    if kind.tile_type == TileType.WALL and not kind.connects:
        return TileKind(TileType.WALL, connects=DEFAULT_WALL_SIDES)
    return kind


def repair_walls(grid: Grid) -> int:
    """
    Apply repair_tile to every cell, in place.

    Returns:
        The number of walls repaired.
    """
    bare_walls = grid.tiles == int(TileType.WALL)
    grid.tiles[bare_walls] = repair_tile(TileKind(TileType.WALL)).code
    return int(np.count_nonzero(bare_walls))
