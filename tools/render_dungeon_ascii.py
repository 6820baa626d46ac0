#!/usr/bin/env python3
"""
Render a generated map as ASCII art for debugging.

Usage:
    python tools/render_dungeon_ascii.py [--rooms N] [--width N] [--height N] [--seed S]
"""

import argparse
import random
import sys
from pathlib import Path

# Add parent directory to path so we can import roomgen
sys.path.insert(0, str(Path(__file__).parent.parent))

from roomgen.config import GenerationConfig
from roomgen.errors import GenerationError
from roomgen.generator import RoomGenerator
from roomgen.geometry import ComplexRoom
from roomgen.tiles import TileType


def main():
    defaults = GenerationConfig()
    parser = argparse.ArgumentParser(description="Render a generated map as ASCII art")
    parser.add_argument("--rooms", type=int, default=defaults.room_count, help="Rooms to attempt")
    parser.add_argument("--width", type=int, default=defaults.map_width, help="Map width in tiles")
    parser.add_argument("--height", type=int, default=defaults.map_height, help="Map height in tiles")
    parser.add_argument("--room-width", type=int, default=defaults.mean_room_width)
    parser.add_argument("--room-height", type=int, default=defaults.mean_room_height)
    parser.add_argument("--width-variance", type=int, default=defaults.width_variance)
    parser.add_argument("--height-variance", type=int, default=defaults.height_variance)
    parser.add_argument("--enemies", type=int, default=defaults.max_enemies_per_room, help="Max enemies per room")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible generation")
    args = parser.parse_args()

    config = GenerationConfig(
        room_count=args.rooms,
        map_width=args.width,
        map_height=args.height,
        mean_room_width=args.room_width,
        mean_room_height=args.room_height,
        width_variance=args.width_variance,
        height_variance=args.height_variance,
        max_enemies_per_room=args.enemies,
    )
    if args.seed is not None:
        print(f"Using random seed: {args.seed}", file=sys.stderr)
    rng = random.Random(args.seed)

    try:
        generator = RoomGenerator(config)
        grid, creatures = generator.generate_rooms(rng)
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(grid.to_ascii())

    # Print some debug info
    complex_rooms = sum(1 for room in generator.rooms if isinstance(room, ComplexRoom))
    enemies = sum(1 for c in creatures if c.tile_kind.tile_type == TileType.ENEMY)
    print(f"\n--- Debug Info ---")
    print(f"Map size: {grid.width}x{grid.height} tiles")
    print(f"Rooms accepted: {len(generator.rooms)} of {config.room_count} ({complex_rooms} merged)")
    print(f"Entrance: {grid.positions_of(TileType.ENTRANCE)}, exit: {grid.positions_of(TileType.EXIT)}")
    print(f"Enemies: {enemies}")


if __name__ == "__main__":
    main()
