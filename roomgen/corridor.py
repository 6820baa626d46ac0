"""
Corridors
=========

A corridor joins one interior point of a room to one interior point of
another. It is three tiles wide: a floor centerline flanked by walls, with a
wall cap one tile past each end.

If the two points share a column or a row the corridor is a single straight
segment. Otherwise it is an L: a vertical segment along the destination
column, then a horizontal segment along the source row, meeting at the
corner (to_x, from_y).

The corridor is rendered into a patch sized to its own bounding box and
blitted onto the map at ``offsets``.
"""

from dataclasses import dataclass
from typing import Tuple

from .geometry import Room, random_point_in
from .grid import Grid
from .random_source import RandomSource
from .tiles import EMPTY_WALL, FLOOR


def _horizontal_segment(patch: Grid, from_x: int, to_x: int, at_y: int) -> None:
    start = min(from_x, to_x) - 1
    end = max(from_x, to_x) + 1
    for x in range(start, end + 1):
        patch.place(x, at_y, EMPTY_WALL if x in (start, end) else FLOOR)
        patch.place(x, at_y - 1, EMPTY_WALL)
        patch.place(x, at_y + 1, EMPTY_WALL)


def _vertical_segment(patch: Grid, from_y: int, to_y: int, at_x: int) -> None:
    start = min(from_y, to_y) - 1
    end = max(from_y, to_y) + 1
    for y in range(start, end + 1):
        patch.place(at_x, y, EMPTY_WALL if y in (start, end) else FLOOR)
        patch.place(at_x - 1, y, EMPTY_WALL)
        patch.place(at_x + 1, y, EMPTY_WALL)


@dataclass(frozen=True)
class Corridor:
    from_x: int
    from_y: int
    to_x: int
    to_y: int

    def __post_init__(self) -> None:
        # The walls around each end need one tile of room on every side
        if min(self.from_x, self.from_y, self.to_x, self.to_y) < 1:
            raise ValueError(f"corridor endpoints must be at least 1 from the edge: {self}")

    @classmethod
    def between(cls, from_room: Room, to_room: Room, rng: RandomSource) -> "Corridor":
        """Pick a random interior point in each room and join them."""
        from_x, from_y = random_point_in(from_room, rng)
        to_x, to_y = random_point_in(to_room, rng)
        return cls(from_x=from_x, from_y=from_y, to_x=to_x, to_y=to_y)

    @property
    def offsets(self) -> Tuple[int, int]:
        """Map position of the patch's top-left corner."""
        return (min(self.from_x, self.to_x) - 1, min(self.from_y, self.to_y) - 1)

    @property
    def extents(self) -> Tuple[int, int]:
        """(width, height) of the rendered patch."""
        offset_x, offset_y = self.offsets
        return (
            max(self.from_x, self.to_x) + 2 - offset_x,
            max(self.from_y, self.to_y) + 2 - offset_y,
        )

    def render(self) -> Grid:
        offset_x, offset_y = self.offsets
        patch = Grid(*self.extents)

        from_x, from_y = self.from_x - offset_x, self.from_y - offset_y
        to_x, to_y = self.to_x - offset_x, self.to_y - offset_y

        if from_x == to_x:
            _vertical_segment(patch, from_y, to_y, to_x)
        elif from_y == to_y:
            _horizontal_segment(patch, from_x, to_x, from_y)
        else:
            _vertical_segment(patch, from_y, to_y, to_x)
            _horizontal_segment(patch, from_x, to_x, from_y)
        return patch


def carve_corridor(grid: Grid, from_room: Room, to_room: Room, rng: RandomSource) -> Corridor:
    """Join two rooms with a random corridor and blit it onto the grid."""
    corridor = Corridor.between(from_room, to_room, rng)
    grid.blit(corridor.render(), *corridor.offsets)
    return corridor
