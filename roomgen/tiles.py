"""
Tile kinds
==========

Every cell of the terrain grid holds one TileKind. Walls additionally record
which cardinal sides join another wall, and corridor cells record whether they
sit on the entrance end of the corridor.

A TileKind packs into a single integer (see ``TileKind.code``) so that grids
can be stored as numpy arrays:

    bits 0-2  TileType
    bit  3    corridor entrance end
    bits 4-7  WallSide flags
"""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from functools import lru_cache
from typing import Any, Dict

from .errors import TileReplacementError


class TileType(IntEnum):
    NONE = 0
    FLOOR = 1
    CORRIDOR = 2
    PLAYER = 3
    ENEMY = 4
    WALL = 5
    ENTRANCE = 6
    EXIT = 7


class WallSide(IntFlag):
    """Which sides of a wall cell join a neighbouring wall."""

    NONE = 0
    NORTH = 1
    SOUTH = 2
    EAST = 4
    WEST = 8


TYPE_MASK = 0b111
ENTRANCE_END_BIT = 0b1000
WALL_SHIFT = 4

ENTITY_TYPES = frozenset({TileType.PLAYER, TileType.ENEMY})

# Tiles next to which a wall makes sense
WALL_MAKING_TYPES = frozenset({TileType.FLOOR, TileType.CORRIDOR})

# Names used by the tagged JSON form, e.g. {"type": "Wall", "north": true}
_TYPE_NAMES: Dict[TileType, str] = {
    TileType.NONE: "None",
    TileType.FLOOR: "Floor",
    TileType.CORRIDOR: "Corridor",
    TileType.PLAYER: "Player",
    TileType.ENEMY: "Enemy",
    TileType.WALL: "Wall",
    TileType.ENTRANCE: "Entrance",
    TileType.EXIT: "Exit",
}
_NAME_TYPES: Dict[str, TileType] = {name: tile_type for tile_type, name in _TYPE_NAMES.items()}

_SIDE_KEYS = (
    (WallSide.NORTH, "north", "connects_north"),
    (WallSide.SOUTH, "south", "connects_south"),
    (WallSide.EAST, "east", "connects_east"),
    (WallSide.WEST, "west", "connects_west"),
)


@dataclass(frozen=True)
class TileKind:
    """The classification of a single terrain cell."""

    tile_type: TileType = TileType.NONE
    entrance_end: bool = False
    connects: WallSide = WallSide.NONE

    def __post_init__(self) -> None:
        if self.entrance_end and self.tile_type != TileType.CORRIDOR:
            raise ValueError(f"only corridors have an entrance end, not {self.name}")
        if self.connects and self.tile_type != TileType.WALL:
            raise ValueError(f"only walls connect to neighbours, not {self.name}")

    @property
    def name(self) -> str:
        return _TYPE_NAMES[self.tile_type]

    @property
    def code(self) -> int:
        return (
            int(self.tile_type)
            | (ENTRANCE_END_BIT if self.entrance_end else 0)
            | (int(self.connects) << WALL_SHIFT)
        )

    @staticmethod
    def decode(code: int) -> "TileKind":
        return _decode(int(code))

    @property
    def is_entity(self) -> bool:
        return self.tile_type in ENTITY_TYPES

    @property
    def makes_walls(self) -> bool:
        return self.tile_type in WALL_MAKING_TYPES

    @property
    def connects_to_walls(self) -> bool:
        return self.tile_type == TileType.WALL

    @property
    def connects_north(self) -> bool:
        return bool(self.connects & WallSide.NORTH)

    @property
    def connects_south(self) -> bool:
        return bool(self.connects & WallSide.SOUTH)

    @property
    def connects_east(self) -> bool:
        return bool(self.connects & WallSide.EAST)

    @property
    def connects_west(self) -> bool:
        return bool(self.connects & WallSide.WEST)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.name}
        if self.tile_type == TileType.CORRIDOR:
            data["start"] = self.entrance_end
        elif self.tile_type == TileType.WALL:
            for side, key, _ in _SIDE_KEYS:
                data[key] = bool(self.connects & side)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TileKind":
        """Parse the tagged form produced by to_dict (long wall keys accepted too)."""
        try:
            tile_type = _NAME_TYPES[data["type"]]
        except KeyError:
            raise ValueError(f"Unknown tile description: {data!r}") from None

        if tile_type == TileType.CORRIDOR:
            return cls(tile_type, entrance_end=bool(data.get("start", False)))
        if tile_type == TileType.WALL:
            connects = WallSide.NONE
            for side, key, alias in _SIDE_KEYS:
                if data.get(key, data.get(alias, False)):
                    connects |= side
            return cls(tile_type, connects=connects)
        return cls(tile_type)

    def __str__(self) -> str:
        if self.tile_type == TileType.WALL and self.connects:
            sides = "".join(key[0].upper() for side, key, _ in _SIDE_KEYS if self.connects & side)
            return f"Wall[{sides}]"
        if self.entrance_end:
            return "Corridor[start]"
        return self.name


@lru_cache(maxsize=None)
def _decode(code: int) -> TileKind:
    return TileKind(
        TileType(code & TYPE_MASK),
        entrance_end=bool(code & ENTRANCE_END_BIT),
        connects=WallSide((code >> WALL_SHIFT) & 0b1111),
    )


NONE = TileKind()
FLOOR = TileKind(TileType.FLOOR)
PLAYER = TileKind(TileType.PLAYER)
ENEMY = TileKind(TileType.ENEMY)
ENTRANCE = TileKind(TileType.ENTRANCE)
EXIT = TileKind(TileType.EXIT)
EMPTY_WALL = TileKind(TileType.WALL)


def wall(
    north: bool = False, south: bool = False, east: bool = False, west: bool = False
) -> TileKind:
    connects = WallSide.NONE
    if north:
        connects |= WallSide.NORTH
    if south:
        connects |= WallSide.SOUTH
    if east:
        connects |= WallSide.EAST
    if west:
        connects |= WallSide.WEST
    return TileKind(TileType.WALL, connects=connects)


def corridor(entrance_end: bool = False) -> TileKind:
    return TileKind(TileType.CORRIDOR, entrance_end=entrance_end)


def can_replace(new: TileKind, old: TileKind) -> bool:
    """
    Decide whether ``new`` may overwrite ``old`` when patches are composited.

    Raises:
        TileReplacementError: If an entity would replace a terrain tile.
    """
    new_type, old_type = new.tile_type, old.tile_type

    if new_type == TileType.CORRIDOR and old_type == TileType.CORRIDOR:
        return new.entrance_end or not old.entrance_end
    if old_type in (TileType.ENTRANCE, TileType.EXIT):
        return False
    if new_type == TileType.CORRIDOR:
        return True
    if new_type == TileType.FLOOR and old_type == TileType.CORRIDOR:
        return False
    if new_type == TileType.WALL and old_type in (TileType.CORRIDOR, TileType.FLOOR):
        return False
    if new_type in ENTITY_TYPES:
        if old_type not in ENTITY_TYPES:
            raise TileReplacementError(new, old)
        # Players displace enemies, never the other way round
        return not (new_type == TileType.ENEMY and old_type == TileType.PLAYER)
    return True
