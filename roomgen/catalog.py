"""
Texture lookup for generated tiles.

The generator only decides what each cell *is*. A TextureCatalog maps each
TileKind to the texture indices a tile set provides for it, so that a
renderer can draw the map. When a kind has several textures, one is picked
at random per cell.

Catalogs can be loaded from a JSON index of the form:

    {
      "tiles": [
        {"tile": {"type": "Floor"}, "textures": [0, 1, 2]},
        {"tile": {"type": "Wall", "north": true, "south": true,
                  "east": false, "west": false}, "textures": [7]}
      ]
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .creatures import Creature
from .errors import UnknownTileError
from .grid import Grid
from .random_source import RandomSource, rand_range, resolve_rng
from .tiles import TileKind


class TextureCatalog:
    def __init__(self, textures: Optional[Mapping[TileKind, Iterable[int]]] = None) -> None:
        self._textures: Dict[TileKind, List[int]] = {}
        for kind, indexes in (textures or {}).items():
            for texture_index in indexes:
                self.register(kind, texture_index)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextureCatalog":
        catalog = cls()
        for entry in data.get("tiles", []):
            kind = TileKind.from_dict(entry["tile"])
            for texture_index in entry["textures"]:
                catalog.register(kind, int(texture_index))
        return catalog

    @classmethod
    def load(cls, path: Union[str, Path]) -> "TextureCatalog":
        with open(path, encoding="utf-8") as index_file:
            return cls.from_dict(json.load(index_file))

    def register(self, kind: TileKind, texture_index: int) -> None:
        self._textures.setdefault(kind, []).append(texture_index)

    def __contains__(self, kind: object) -> bool:
        return kind in self._textures

    def __len__(self) -> int:
        return len(self._textures)

    def textures_for(self, kind: TileKind) -> List[int]:
        try:
            return list(self._textures[kind])
        except KeyError:
            raise UnknownTileError(kind) from None

    def pick(self, kind: TileKind, rng: Optional[RandomSource] = None) -> int:
        """
        Choose a texture index for one cell of the given kind.

        Raises:
            UnknownTileError: If nothing is registered for kind.
        """
        choices = self._textures.get(kind)
        if not choices:
            raise UnknownTileError(kind)
        if len(choices) == 1:
            return choices[0]
        return choices[rand_range(resolve_rng(rng), 0, len(choices))]


def assign_textures(
    grid: Grid,
    creatures: List[Creature],
    catalog: TextureCatalog,
    rng: Optional[RandomSource] = None,
) -> None:
    """Fill in texture_index for every grid cell and creature, in place."""
    rng = resolve_rng(rng)
    for x in range(grid.width):
        for y in range(grid.height):
            grid.set_texture(x, y, catalog.pick(grid[x, y], rng))
    for creature in creatures:
        creature.texture_index = catalog.pick(creature.tile_kind, rng)
