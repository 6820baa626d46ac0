"""Procedural room-and-corridor map generation."""

from roomgen.config import GenerationConfig
from roomgen.errors import (
    GenerationError,
    ConfigurationError,
    CompositionError,
    TileReplacementError,
    PrecedenceConflictError,
    UnknownTileError,
)
from roomgen.geometry import (
    Rect,
    BasicRoom,
    ComplexRoom,
    Room,
    calculate_aabb,
    combine_rooms,
    random_point_in,
)
from roomgen.intersection import OverlapState, Precedence, intersects
from roomgen.tiles import TileKind, TileType, WallSide, can_replace
from roomgen.grid import Grid, TerrainCell, render_room, render_rect
from roomgen.corridor import Corridor, carve_corridor
from roomgen.walls import connect_walls, repair_walls
from roomgen.creatures import Creature, spawn_creature
from roomgen.generator import RoomGenerator, generate, place_rooms
from roomgen.catalog import TextureCatalog, assign_textures
from roomgen.world import WorldState, create_random_world
