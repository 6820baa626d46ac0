"""
Room Generation Algorithm
=========================

We scatter random rectangles over the map and let overlapping ones merge.

1. Repeat room_count times:
   a. Draw a room size (mean +/- variance) and a position that fits the map
   b. Compare the candidate with every accepted room, in order:
      - no overlap: nothing to do
      - candidate strictly contains the accepted room: drop the accepted room
      - accepted room contains (or equals) the candidate: reject the candidate
      - partial overlap: drop the accepted room and merge it into the candidate
      - the two cross (each wider on one axis): treated as a partial overlap
   c. Remove the dropped rooms and, unless rejected, accept the candidate
2. Render every accepted room onto the map. Each room gets a random number of
   enemies, merged rooms get corridors between their parts, and each room is
   joined to the previous one by a corridor.
3. The first room gets the entrance and the player; the last room the exit.
4. Prune orphan walls and work out how the remaining walls connect.

The number of accepted rooms is usually lower than room_count, since
rejections and merges both shrink the list.
"""

from typing import List, Optional, Tuple, Union

from .config import MIN_ROOM_SIZE, GenerationConfig
from .corridor import carve_corridor
from .errors import PrecedenceConflictError
from .creatures import Creature, spawn_creature
from .geometry import BasicRoom, ComplexRoom, Rect, Room, combine_rooms, random_point_in
from .grid import Grid, render_room
from .intersection import PARTIAL_OVERLAP, OverlapState, Precedence, intersects
from .random_source import RandomSource, rand_range, resolve_rng
from .tiles import ENEMY, ENTRANCE, EXIT, PLAYER
from .walls import connect_walls, repair_walls


class RoomGenerator:
    """Working state of a single generation run."""

    def __init__(self, config: GenerationConfig) -> None:
        config.validate()
        self.config: GenerationConfig = config
        self.rooms: List[Room] = []

    def propose_rect(self, rng: RandomSource) -> Rect:
        """Draw a random room rectangle that fits inside the map."""
        config = self.config
        width = rand_range(rng, config.min_room_width, 2 * config.width_variance + 1)
        height = rand_range(rng, config.min_room_height, 2 * config.height_variance + 1)
        x = rand_range(rng, 0, config.map_width - width)
        y = rand_range(rng, 0, config.map_height - height)
        return Rect(x=x, y=y, width=width, height=height)

    def _check_fits(self, room: Room) -> None:
        for rect in room.rects:
            if rect.width < MIN_ROOM_SIZE or rect.height < MIN_ROOM_SIZE:
                raise ValueError(f"{rect} has no interior")
            if rect.right > self.config.map_width or rect.bottom > self.config.map_height:
                raise ValueError(
                    f"{rect} does not fit the "
                    f"{self.config.map_width}x{self.config.map_height} map"
                )

    def add_room(self, new_room: Union[Rect, Room]) -> bool:
        """
        Run one placement step for a candidate room.

        Returns:
            True if the candidate (possibly merged with others) was accepted.
        """
        candidate: Room = BasicRoom(new_room) if isinstance(new_room, Rect) else new_room
        self._check_fits(candidate)

        should_add = True
        remove_indexes: List[int] = []
        for index, room in enumerate(self.rooms):
            try:
                state, precedence = intersects(room, candidate)
            except PrecedenceConflictError:
                # Neither room contains the other, so they merge
                state, precedence = PARTIAL_OVERLAP
            if state == OverlapState.NONE:
                continue
            if state == OverlapState.FULL:
                if precedence == Precedence.SECOND_WINS:
                    remove_indexes.append(index)
                else:
                    should_add = False
                    break
            else:
                remove_indexes.append(index)
                candidate = combine_rooms(room, candidate)

        # Delete from the back so earlier indexes stay valid
        for index in reversed(remove_indexes):
            del self.rooms[index]
        if should_add:
            self.rooms.append(candidate)
        return should_add

    def place_rooms(self, rng: Optional[RandomSource] = None) -> List[Room]:
        rng = resolve_rng(rng)
        for _ in range(self.config.room_count):
            self.add_room(self.propose_rect(rng))
        return list(self.rooms)

    def _spawn_enemies(self, rect: Rect, rng: RandomSource, creatures: List[Creature]) -> None:
        enemy_count = rand_range(rng, 0, self.config.max_enemies_per_room)
        for _ in range(enemy_count):
            x, y = random_point_in(BasicRoom(rect), rng)
            creatures.append(spawn_creature(ENEMY, x, y, rng))

    def render(self, rng: Optional[RandomSource] = None) -> Tuple[Grid, List[Creature]]:
        """
        Render the accepted rooms into a fresh grid and populate them.

        Raises:
            ValueError: If no rooms have been placed.
        """
        if not self.rooms:
            raise ValueError("no rooms to render")
        rng = resolve_rng(rng)

        grid = Grid(self.config.map_width, self.config.map_height)
        creatures: List[Creature] = []
        last_index = len(self.rooms) - 1

        for index, room in enumerate(self.rooms):
            grid.blit(render_room(room), room.aabb.x, room.aabb.y)

            if isinstance(room, ComplexRoom):
                for inner_index, rect in enumerate(room.rooms):
                    self._spawn_enemies(rect, rng, creatures)
                    if inner_index > 0:
                        previous = BasicRoom(room.rooms[inner_index - 1])
                        carve_corridor(grid, previous, BasicRoom(rect), rng)
            else:
                self._spawn_enemies(room.rect, rng, creatures)

            if index == 0:
                x, y = random_point_in(room, rng)
                grid.place(x, y, ENTRANCE)
                creatures.append(spawn_creature(PLAYER, x, y, rng))
            if index == last_index:
                x, y = random_point_in(room, rng)
                grid.place(x, y, EXIT)

            if index > 0:
                carve_corridor(grid, self.rooms[index - 1], room, rng)

        connect_walls(grid)
        repair_walls(grid)
        return grid, creatures

    def generate_rooms(self, rng: Optional[RandomSource] = None) -> Tuple[Grid, List[Creature]]:
        rng = resolve_rng(rng)
        self.place_rooms(rng)
        return self.render(rng)


def place_rooms(config: GenerationConfig, rng: Optional[RandomSource] = None) -> List[Room]:
    """Run only the placement stage and return the accepted rooms."""
    return RoomGenerator(config).place_rooms(rng)


def generate(
    config: GenerationConfig, rng: Optional[RandomSource] = None
) -> Tuple[Grid, List[Creature]]:
    """
    Generate a complete map.

    Parameters:
        config: Generation parameters, validated before anything is drawn
        rng: Random source; pass a seeded random.Random for reproducible maps

    Returns:
        grid: The terrain, with wall connections resolved
        creatures: Every spawned creature, in spawn order

    Raises:
        ConfigurationError: If config cannot produce a map.
        CompositionError: If an internal invariant breaks during composition.
    """
    return RoomGenerator(config).generate_rooms(rng)
