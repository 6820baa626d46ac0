"""
Room shapes.

A room is either a BasicRoom wrapping one Rect, or a ComplexRoom made of
several overlapping Rects that were merged during placement. Both expose
``aabb`` and ``rects`` so callers can treat them alike where the variant does
not matter, and dispatch on the type where it does.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .random_source import RandomSource, rand_range


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle of tiles, including its wall ring."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Rect must be at least 1x1, got {self.width}x{self.height}")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Rect origin must not be negative, got ({self.x}, {self.y})")

    @property
    def right(self) -> int:
        """One past the last column."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """One past the last row."""
        return self.y + self.height

    @property
    def x_span(self) -> Tuple[int, int]:
        """Columns compared for overlap: the leading wall is left out."""
        return (self.x + 1, self.x + self.width - 1)

    @property
    def y_span(self) -> Tuple[int, int]:
        return (self.y + 1, self.y + self.height - 1)

    def contains_point(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def is_interior(self, x: int, y: int) -> bool:
        """True for cells inside the wall ring."""
        return self.x < x < self.right - 1 and self.y < y < self.bottom - 1


def calculate_aabb(*rects: Rect) -> Rect:
    """Returns the smallest Rect covering every given Rect."""
    if not rects:
        raise ValueError("calculate_aabb needs at least one Rect")
    left = min(rect.x for rect in rects)
    top = min(rect.y for rect in rects)
    right = max(rect.right for rect in rects)
    bottom = max(rect.bottom for rect in rects)
    return Rect(x=left, y=top, width=right - left, height=bottom - top)


@dataclass(frozen=True)
class BasicRoom:
    rect: Rect

    @property
    def aabb(self) -> Rect:
        return self.rect

    @property
    def rects(self) -> Tuple[Rect, ...]:
        return (self.rect,)


@dataclass(frozen=True)
class ComplexRoom:
    """Several merged Rects plus the bounding box around all of them."""

    rooms: Tuple[Rect, ...]
    aabb: Rect

    def __post_init__(self) -> None:
        if not self.rooms:
            raise ValueError("ComplexRoom needs at least one Rect")
        expected = calculate_aabb(*self.rooms)
        if self.aabb != expected:
            raise ValueError(f"stale aabb {self.aabb}, rooms cover {expected}")

    @classmethod
    def of(cls, rects: Iterable[Rect]) -> "ComplexRoom":
        rooms = tuple(rects)
        return cls(rooms=rooms, aabb=calculate_aabb(*rooms))

    @property
    def rects(self) -> Tuple[Rect, ...]:
        return self.rooms


Room = Union[BasicRoom, ComplexRoom]


def combine_rooms(this: Room, that: Room) -> ComplexRoom:
    """
    Merge two rooms into one ComplexRoom.

    The Rect lists are concatenated in argument order and the bounding box is
    recomputed from the two inputs' boxes.
    """
    return ComplexRoom(
        rooms=this.rects + that.rects,
        aabb=calculate_aabb(this.aabb, that.aabb),
    )


def random_point_in(room: Room, rng: RandomSource) -> Tuple[int, int]:
    """
    Draw a uniformly random interior (non-wall) cell of the room.

    For a ComplexRoom, one of its Rects is chosen first, uniformly.

    Returns:
        (x, y) grid coordinates
    """
    if isinstance(room, ComplexRoom):
        rect = room.rooms[rand_range(rng, 0, len(room.rooms))]
    else:
        rect = room.rect
    x = rand_range(rng, rect.x + 1, rect.width - 2)
    y = rand_range(rng, rect.y + 1, rect.height - 2)
    return x, y
