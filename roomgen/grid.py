"""
Terrain grid and patch compositing.

The grid stores packed TileKind codes in a numpy array of shape
(height, width) and is addressed by (x, y). Every accessor checks its
coordinates, so index arithmetic elsewhere never reads or writes outside
the map.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import numpy as np

from .geometry import BasicRoom, ComplexRoom, Rect, Room
from .tiles import (
    EMPTY_WALL,
    FLOOR,
    NONE,
    TYPE_MASK,
    TileKind,
    TileType,
    can_replace,
)

# One character per tile type, used by to_ascii/from_rows
TILE_TO_ASCII: Dict[TileType, str] = {
    TileType.NONE: " ",
    TileType.FLOOR: ".",
    TileType.CORRIDOR: ":",
    TileType.PLAYER: "@",
    TileType.ENEMY: "e",
    TileType.WALL: "#",
    TileType.ENTRANCE: "<",
    TileType.EXIT: ">",
}
ASCII_TO_TILE: Dict[str, TileKind] = {
    char: TileKind(tile_type) for tile_type, char in TILE_TO_ASCII.items()
}


@dataclass(frozen=True)
class TerrainCell:
    tile_kind: TileKind
    texture_index: int = 0


class Grid:
    """A fixed-size 2-D array of terrain cells."""

    def __init__(self, width: int, height: int, fill: TileKind = NONE) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width: int = width
        self.height: int = height
        self.tiles: np.ndarray = np.full((height, width), fill.code, dtype=np.int16)
        self.textures: np.ndarray = np.zeros((height, width), dtype=np.int32)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """Build a grid from ASCII rows (top row first), see TILE_TO_ASCII."""
        lines = list(rows)
        width = max((len(line) for line in lines), default=0)
        grid = cls(width, len(lines))
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                grid[x, y] = ASCII_TO_TILE[char]
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        """(width, height)"""
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")

    def __getitem__(self, position: Tuple[int, int]) -> TileKind:
        x, y = position
        self._check(x, y)
        return TileKind.decode(self.tiles[y, x])

    def __setitem__(self, position: Tuple[int, int], kind: TileKind) -> None:
        """Overwrite a cell unconditionally. Use place() to respect precedence."""
        x, y = position
        self._check(x, y)
        self.tiles[y, x] = kind.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.tiles, other.tiles) and np.array_equal(
            self.textures, other.textures
        )

    __hash__ = None  # type: ignore[assignment]

    def cell(self, x: int, y: int) -> TerrainCell:
        self._check(x, y)
        return TerrainCell(TileKind.decode(self.tiles[y, x]), int(self.textures[y, x]))

    def set_texture(self, x: int, y: int, texture_index: int) -> None:
        self._check(x, y)
        self.textures[y, x] = texture_index

    def types(self) -> np.ndarray:
        """TileType value of every cell, shape (height, width)."""
        return self.tiles & TYPE_MASK

    def positions_of(self, tile_type: TileType) -> List[Tuple[int, int]]:
        """All (x, y) cells of the given type, in row-major order."""
        ys, xs = np.where(self.types() == tile_type)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def count(self, tile_type: TileType) -> int:
        return int(np.count_nonzero(self.types() == tile_type))

    def place(self, x: int, y: int, kind: TileKind) -> bool:
        """
        Write a single cell if the precedence rule allows it.

        Returns:
            True if the cell changed.
        """
        old = self[x, y]
        if not can_replace(kind, old) or kind == old:
            return False
        self.tiles[y, x] = kind.code
        return True

    def blit(self, patch: "Grid", x: int, y: int) -> int:
        """
        Composite ``patch`` onto this grid with its top-left corner at (x, y).

        Empty (NONE) patch cells are skipped; every other cell goes through
        can_replace. Applying the same patch twice changes nothing the second
        time.

        Returns:
            The number of cells that changed.

        Raises:
            IndexError: If the patch does not fit inside the grid.
        """
        if x < 0 or y < 0 or x + patch.width > self.width or y + patch.height > self.height:
            raise IndexError(
                f"{patch.width}x{patch.height} patch at ({x}, {y}) does not fit "
                f"the {self.width}x{self.height} grid"
            )

        changed = 0
        for patch_y, patch_x in np.argwhere(patch.tiles != NONE.code):
            if self.place(x + int(patch_x), y + int(patch_y), TileKind.decode(patch.tiles[patch_y, patch_x])):
                changed += 1
        return changed

    def to_ascii(self) -> str:
        lines = []
        types = self.types()
        for y in range(self.height):
            lines.append("".join(TILE_TO_ASCII[TileType(t)] for t in types[y]))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


def render_rect(rect: Rect) -> Grid:
    """A rect-sized patch: a ring of walls around a floor interior."""
    patch = Grid(rect.width, rect.height, fill=EMPTY_WALL)
    patch.tiles[1:-1, 1:-1] = FLOOR.code
    return patch


def render_room(room: Room) -> Grid:
    """
    Render a room into a patch the size of its bounding box.

    Inner Rects of a ComplexRoom are composited with the precedence rule, so
    floor always wins over the walls of an overlapping neighbour and the
    borders merge into one outline.
    """
    if isinstance(room, BasicRoom):
        return render_rect(room.rect)
    if isinstance(room, ComplexRoom):
        aabb = room.aabb
        patch = Grid(aabb.width, aabb.height)
        for rect in room.rooms:
            patch.blit(render_rect(rect), rect.x - aabb.x, rect.y - aabb.y)
        return patch
    raise TypeError(f"Cannot render {type(room).__name__}")
