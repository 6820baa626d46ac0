"""
Room Intersection
=================

Classifies how two rooms overlap, so the placement pipeline can decide
whether to merge them, replace one with the other, or ignore the pair.

1. Basic vs Basic: each axis is reduced to a 1-D interval comparison
   (None / Partial / Full, plus which interval is the superset). The two
   axes are then combined:
   - either axis None -> None
   - both Full -> Full, with the axes' precedences reconciled
   - otherwise -> Partial
2. Basic vs Complex: the complex room's bounding box is a cheap rejection
   test, then the basic Rect is compared with every inner Rect.
3. Complex vs Complex: bounding boxes first, then any overlapping pair of
   inner Rects makes the result Partial. Full containment between two merged
   rooms is never reported.
"""

from enum import Enum, auto
from typing import Tuple

from .errors import PrecedenceConflictError
from .geometry import BasicRoom, ComplexRoom, Rect, Room


class OverlapState(Enum):
    NONE = auto()
    PARTIAL = auto()
    FULL = auto()


class Precedence(Enum):
    """Which argument is the superset. Only meaningful for a FULL overlap."""

    FIRST_WINS = auto()
    SECOND_WINS = auto()
    TIED = auto()

    def inverted(self) -> "Precedence":
        """Returns the precedence seen with the arguments swapped."""
        swapped = {
            Precedence.FIRST_WINS: Precedence.SECOND_WINS,
            Precedence.SECOND_WINS: Precedence.FIRST_WINS,
            Precedence.TIED: Precedence.TIED,
        }
        return swapped[self]


Intersection = Tuple[OverlapState, Precedence]

NO_OVERLAP: Intersection = (OverlapState.NONE, Precedence.TIED)
PARTIAL_OVERLAP: Intersection = (OverlapState.PARTIAL, Precedence.TIED)


def edge_intersects(
    first_start: int, first_end: int, second_start: int, second_end: int
) -> Intersection:
    """Compare two closed intervals [start, end]."""
    if first_end < second_start or second_end < first_start:
        return NO_OVERLAP
    if first_start == second_start and first_end == second_end:
        return (OverlapState.FULL, Precedence.TIED)
    if first_start <= second_start and second_end <= first_end:
        return (OverlapState.FULL, Precedence.FIRST_WINS)
    if second_start <= first_start and first_end <= second_end:
        return (OverlapState.FULL, Precedence.SECOND_WINS)
    return PARTIAL_OVERLAP


def combine_axes(x_result: Intersection, y_result: Intersection) -> Intersection:
    """
    Merge the per-axis results into one 2-D result.

    Raises:
        PrecedenceConflictError: If both axes are FULL but name different
            supersets.
    """
    x_state, x_precedence = x_result
    y_state, y_precedence = y_result

    if x_state == OverlapState.NONE or y_state == OverlapState.NONE:
        return NO_OVERLAP
    if x_state == OverlapState.FULL and y_state == OverlapState.FULL:
        if x_precedence == y_precedence or y_precedence == Precedence.TIED:
            return (OverlapState.FULL, x_precedence)
        if x_precedence == Precedence.TIED:
            return (OverlapState.FULL, y_precedence)
        raise PrecedenceConflictError(x_precedence, y_precedence)
    return PARTIAL_OVERLAP


def rect_intersects(first: Rect, second: Rect) -> Intersection:
    return combine_axes(
        edge_intersects(*first.x_span, *second.x_span),
        edge_intersects(*first.y_span, *second.y_span),
    )


def rects_overlap(first: Rect, second: Rect) -> bool:
    """True if the rects overlap at all, using the same spans as rect_intersects."""
    first_x0, first_x1 = first.x_span
    second_x0, second_x1 = second.x_span
    first_y0, first_y1 = first.y_span
    second_y0, second_y1 = second.y_span
    return (
        first_x0 <= second_x1
        and second_x0 <= first_x1
        and first_y0 <= second_y1
        and second_y0 <= first_y1
    )


def _basic_complex_intersection(rect: Rect, complex_room: ComplexRoom) -> Intersection:
    # Precedence is from the point of view of (rect, complex_room)
    if not rects_overlap(rect, complex_room.aabb):
        return NO_OVERLAP

    partial = False
    contained = 0
    for inner in complex_room.rooms:
        state, precedence = rect_intersects(rect, inner)
        if state == OverlapState.FULL:
            if precedence != Precedence.FIRST_WINS:
                # An inner Rect covers the basic one, so the merged room does too
                return (OverlapState.FULL, Precedence.SECOND_WINS)
            contained += 1
        elif state == OverlapState.PARTIAL:
            partial = True

    if partial:
        return PARTIAL_OVERLAP
    if contained == len(complex_room.rooms):
        return (OverlapState.FULL, Precedence.FIRST_WINS)
    if contained:
        # Swallows some inner Rects but not the whole room
        return PARTIAL_OVERLAP
    return NO_OVERLAP


def _complex_complex_intersection(first: ComplexRoom, second: ComplexRoom) -> Intersection:
    if not rects_overlap(first.aabb, second.aabb):
        return NO_OVERLAP
    for first_rect in first.rooms:
        for second_rect in second.rooms:
            if rects_overlap(first_rect, second_rect):
                return PARTIAL_OVERLAP
    return NO_OVERLAP


def intersects(first: Room, second: Room) -> Intersection:
    """
    Classify the overlap between two rooms.

    Returns:
        (state, precedence) where precedence says which argument is the
        superset when state is FULL, and is TIED otherwise.

    Raises:
        PrecedenceConflictError: See combine_axes.
    """
    if isinstance(first, BasicRoom) and isinstance(second, BasicRoom):
        return rect_intersects(first.rect, second.rect)
    if isinstance(first, BasicRoom) and isinstance(second, ComplexRoom):
        return _basic_complex_intersection(first.rect, second)
    if isinstance(first, ComplexRoom) and isinstance(second, BasicRoom):
        state, precedence = _basic_complex_intersection(second.rect, first)
        return (state, precedence.inverted())
    if isinstance(first, ComplexRoom) and isinstance(second, ComplexRoom):
        return _complex_complex_intersection(first, second)
    raise TypeError(f"Cannot intersect {type(first).__name__} with {type(second).__name__}")
