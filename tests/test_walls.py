"""Tests for the wall-connectivity pass."""

from roomgen.grid import Grid
from roomgen.tiles import NONE, TileKind, TileType, WallSide, wall
from roomgen.walls import connect_walls, repair_tile, repair_walls


def room_with_orphan() -> Grid:
    return Grid.from_rows(
        [
            "#####  ",
            "#...#  ",
            "#####  ",
            "      #",
        ]
    )


class TestConnectWalls:
    def test_orphan_wall_is_removed(self):
        grid = room_with_orphan()
        assert connect_walls(grid) == 1
        assert grid[6, 3] == NONE
        assert grid.count(TileType.WALL) == 12

    def test_corners_connect_along_the_ring(self):
        grid = room_with_orphan()
        connect_walls(grid)
        assert grid[0, 0] == wall(south=True, east=True)
        assert grid[4, 0] == wall(south=True, west=True)
        assert grid[0, 2] == wall(north=True, east=True)
        assert grid[4, 2] == wall(north=True, west=True)

    def test_straight_walls(self):
        grid = room_with_orphan()
        connect_walls(grid)
        assert grid[2, 0] == wall(east=True, west=True)
        assert grid[2, 2] == wall(east=True, west=True)
        assert grid[0, 1] == wall(north=True, south=True)

    def test_diagonal_floor_keeps_a_wall(self):
        grid = Grid.from_rows(["#  ", " . ", "   "])
        assert connect_walls(grid) == 0
        assert grid[0, 0].tile_type == TileType.WALL

    def test_walls_next_to_nothing_walkable_are_pruned(self):
        """Entrances and exits do not hold walls up on their own."""
        grid = Grid.from_rows(["###", "#<#", "###"])
        assert connect_walls(grid) == 8
        assert grid.to_ascii() == "   \n < \n   "

    def test_demoted_walls_do_not_count_as_neighbours(self):
        grid = Grid.from_rows([".#", " ##", "   ", "   "])
        connect_walls(grid)
        # (2, 1) has no floor nearby and goes away; (1, 1) keeps only its north link
        assert grid[2, 1] == NONE
        assert grid[1, 1] == wall(north=True)
        assert grid[1, 0] == wall(south=True)

    def test_every_surviving_wall_touches_floor(self):
        grid = Grid.from_rows(
            [
                "##########",
                "#........#",
                "#####.####",
                "    #.#  #",
                "    ###   ",
                "#         ",
            ]
        )
        connect_walls(grid)
        for x, y in grid.positions_of(TileType.WALL):
            neighbours = [
                grid[nx, ny]
                for nx in (x - 1, x, x + 1)
                for ny in (y - 1, y, y + 1)
                if (nx, ny) != (x, y) and grid.in_bounds(nx, ny)
            ]
            assert any(kind.makes_walls for kind in neighbours)


class TestRepair:
    def test_bare_wall_becomes_east_west(self):
        assert repair_tile(TileKind(TileType.WALL)) == wall(east=True, west=True)

    def test_connected_wall_is_untouched(self):
        kind = wall(north=True)
        assert repair_tile(kind) == kind

    def test_other_tiles_are_untouched(self):
        assert repair_tile(NONE) == NONE

    def test_repair_walls_on_a_pillar(self):
        grid = Grid.from_rows(["...", ".#.", "..."])
        connect_walls(grid)
        assert grid[1, 1].connects == WallSide.NONE
        assert repair_walls(grid) == 1
        assert grid[1, 1] == wall(east=True, west=True)
