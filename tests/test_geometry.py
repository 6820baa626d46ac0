"""Tests for rectangles, room shapes and merging."""

import random

import pytest

from roomgen.geometry import (
    BasicRoom,
    ComplexRoom,
    Rect,
    calculate_aabb,
    combine_rooms,
    random_point_in,
)


class TestRect:
    def test_rejects_empty_rect(self):
        with pytest.raises(ValueError):
            Rect(0, 0, 0, 5)

    def test_rejects_negative_origin(self):
        with pytest.raises(ValueError):
            Rect(-1, 0, 5, 5)

    def test_edges(self):
        rect = Rect(2, 3, 6, 4)
        assert (rect.right, rect.bottom) == (8, 7)
        assert rect.x_span == (3, 7)
        assert rect.y_span == (4, 6)

    def test_interior_excludes_the_wall_ring(self):
        rect = Rect(2, 2, 6, 6)
        assert rect.is_interior(3, 3)
        assert rect.is_interior(6, 6)
        assert not rect.is_interior(2, 4)
        assert not rect.is_interior(7, 4)
        assert rect.contains_point(7, 7)
        assert not rect.contains_point(8, 7)


class TestCombineRooms:
    def test_two_basic_rooms_become_complex(self):
        merged = combine_rooms(BasicRoom(Rect(0, 0, 5, 5)), BasicRoom(Rect(3, 3, 5, 5)))
        assert isinstance(merged, ComplexRoom)
        assert merged.rooms == (Rect(0, 0, 5, 5), Rect(3, 3, 5, 5))
        assert merged.aabb == Rect(0, 0, 8, 8)

    def test_basic_and_complex(self):
        complex_room = ComplexRoom.of([Rect(0, 0, 5, 5), Rect(3, 3, 5, 5)])
        merged = combine_rooms(BasicRoom(Rect(6, 1, 4, 4)), complex_room)
        assert merged.rooms == (Rect(6, 1, 4, 4), Rect(0, 0, 5, 5), Rect(3, 3, 5, 5))
        assert merged.aabb == Rect(0, 0, 10, 8)

    def test_two_complex_rooms_concatenate(self):
        first = ComplexRoom.of([Rect(0, 0, 5, 5), Rect(3, 3, 5, 5)])
        second = ComplexRoom.of([Rect(10, 10, 4, 4), Rect(12, 1, 3, 12)])
        merged = combine_rooms(first, second)
        assert merged.rooms == first.rooms + second.rooms
        assert merged.aabb == Rect(0, 0, 15, 14)

    def test_aabb_stays_minimal_through_many_merges(self):
        """The bounding box always equals the box of all parts."""
        rng = random.Random(1234)
        room = BasicRoom(Rect(20, 20, 5, 5))
        for _ in range(40):
            rect = Rect(
                rng.randrange(0, 40), rng.randrange(0, 40), rng.randrange(3, 9), rng.randrange(3, 9)
            )
            if rng.randrange(0, 2):
                room = combine_rooms(room, BasicRoom(rect))
            else:
                room = combine_rooms(BasicRoom(rect), room)
            assert room.aabb == calculate_aabb(*room.rooms)

    def test_stale_aabb_is_rejected(self):
        with pytest.raises(ValueError):
            ComplexRoom(rooms=(Rect(0, 0, 5, 5), Rect(3, 3, 5, 5)), aabb=Rect(0, 0, 5, 5))

    def test_rooms_are_values(self):
        assert BasicRoom(Rect(1, 2, 3, 4)) == BasicRoom(Rect(1, 2, 3, 4))
        assert ComplexRoom.of([Rect(0, 0, 5, 5)]) == ComplexRoom.of([Rect(0, 0, 5, 5)])


class TestRandomPointIn:
    def test_basic_room_points_are_interior(self):
        rng = random.Random(3)
        rect = Rect(2, 2, 6, 5)
        points = {random_point_in(BasicRoom(rect), rng) for _ in range(300)}
        assert all(rect.is_interior(x, y) for x, y in points)
        # 4x3 interior, every cell reachable
        assert len(points) == 12

    def test_complex_room_points_are_inside_some_part(self):
        rng = random.Random(4)
        room = ComplexRoom.of([Rect(0, 0, 5, 5), Rect(10, 10, 4, 4)])
        for _ in range(200):
            x, y = random_point_in(room, rng)
            assert any(rect.is_interior(x, y) for rect in room.rooms)

    def test_smallest_room_has_one_point(self):
        assert random_point_in(BasicRoom(Rect(4, 6, 3, 3)), random.Random(0)) == (5, 7)
