"""Tests for the world factory and WorldState queries."""

import pytest

from roomgen.catalog import TextureCatalog
from roomgen.config import GenerationConfig
from roomgen.grid import Grid
from roomgen.creatures import Creature
from roomgen.tiles import ENEMY, ENTRANCE, FLOOR, NONE, PLAYER, TileKind, TileType, WallSide, corridor
from roomgen.world import WorldState, create_random_world

SMALL = GenerationConfig(
    room_count=8,
    map_width=40,
    map_height=24,
    mean_room_width=6,
    mean_room_height=5,
    width_variance=0,
    height_variance=0,
)


def full_catalog():
    textures = {
        NONE: [0],
        FLOOR: [1, 2],
        corridor(): [3],
        corridor(True): [3],
        ENTRANCE: [4],
        TileKind(TileType.EXIT): [5],
        PLAYER: [6],
        ENEMY: [7],
    }
    for bits in range(16):
        textures[TileKind(TileType.WALL, connects=WallSide(bits))] = [16 + bits]
    return TextureCatalog(textures)


class TestWorldState:
    @pytest.fixture
    def world(self):
        terrain = Grid.from_rows(["#####", "#<..#", "#####"])
        creatures = [
            Creature(PLAYER, (1, 1), health=50, strength=6, defense=1),
            Creature(ENEMY, (3, 1), health=55, strength=9, defense=0),
        ]
        return WorldState(terrain=terrain, creatures=creatures)

    def test_player_and_enemies(self, world):
        assert world.player.position == (1, 1)
        assert [enemy.position for enemy in world.enemies] == [(3, 1)]

    def test_creature_at(self, world):
        assert world.creature_at(3, 1).tile_kind == ENEMY
        assert world.creature_at(2, 1) is None

    @pytest.mark.parametrize(
        "position, walkable",
        [((1, 1), True), ((2, 1), True), ((0, 0), False), ((4, 1), False), ((9, 9), False), ((-1, 1), False)],
    )
    def test_is_tile_walkable(self, world, position, walkable):
        assert world.is_tile_walkable(*position) == walkable

    def test_empty_world_has_no_player(self):
        assert WorldState(terrain=Grid(2, 2)).player is None


class TestCreateRandomWorld:
    def test_seeded_worlds_match(self):
        first = create_random_world(SMALL, seed=5)
        second = create_random_world(SMALL, seed=5)
        assert first.terrain == second.terrain
        assert first.creatures == second.creatures
        assert first.player is not None

    def test_reports_progress_on_stderr(self, capsys):
        create_random_world(SMALL, seed=1)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Generating world: 8 rooms on a 40x24 map" in captured.err

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_default_configuration(self, seed):
        world = create_random_world(seed=seed)
        assert world.terrain.shape == (100, 40)
        assert world.player is not None
        assert world.is_tile_walkable(world.player.x, world.player.y)

    def test_player_starts_on_walkable_ground(self):
        world = create_random_world(SMALL, seed=3)
        assert world.is_tile_walkable(world.player.x, world.player.y)

    def test_textures_assigned_from_catalog(self):
        world = create_random_world(SMALL, seed=4, catalog=full_catalog())
        terrain = world.terrain

        for x, y in terrain.positions_of(TileType.WALL):
            assert terrain.cell(x, y).texture_index == 16 + int(terrain[x, y].connects)
        for x, y in terrain.positions_of(TileType.FLOOR):
            assert terrain.cell(x, y).texture_index in (1, 2)
        assert world.player.texture_index == 6
        assert all(enemy.texture_index == 7 for enemy in world.enemies)
