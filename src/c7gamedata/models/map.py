from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..civ3.coordinates import get_tile_index
from .resource import Resource
from .terrain import TerrainType

logger = logging.getLogger(__name__)


class TileDirection(Enum):
    """Neighbor directions on the staggered grid, valued by (dx, dy) offset.

    Tiles only exist where x + y is even, so north/south neighbors are two
    rows away and east/west neighbors two columns away.
    """

    NORTH = (0, -2)
    NORTHEAST = (1, -1)
    EAST = (2, 0)
    SOUTHEAST = (1, 1)
    SOUTH = (0, 2)
    SOUTHWEST = (-1, 1)
    WEST = (-2, 0)
    NORTHWEST = (-1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Civ3ExtraInfo:
    """Civ3 texture atlas coordinates, kept only to round-trip the original media."""

    base_terrain_file_id: int = 0
    base_terrain_image_id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_terrain_file_id": self.base_terrain_file_id,
            "base_terrain_image_id": self.base_terrain_image_id,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Civ3ExtraInfo":
        return Civ3ExtraInfo(
            base_terrain_file_id=int(data.get("base_terrain_file_id", 0)),
            base_terrain_image_id=int(data.get("base_terrain_image_id", 0)),
        )


@dataclass(eq=False)
class Tile:
    x: int
    y: int
    base_terrain_type: TerrainType
    overlay_terrain_type: TerrainType
    resource: Resource = Resource.NONE
    is_snow_capped: bool = False
    is_pine_forest: bool = False
    river_northeast: bool = False
    river_southeast: bool = False
    river_southwest: bool = False
    river_northwest: bool = False
    extra_info: Optional[Civ3ExtraInfo] = None
    # Rebuilt by Map.compute_neighbors(); never persisted.
    neighbors: Dict[TileDirection, "Tile"] = field(default_factory=dict, repr=False)

    @property
    def coordinates(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def neighbor(self, direction: TileDirection) -> Optional["Tile"]:
        return self.neighbors.get(direction)

    def has_river(self) -> bool:
        return self.river_northeast or self.river_southeast or self.river_southwest or self.river_northwest

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "base_terrain_type_key": self.base_terrain_type.key,
            "overlay_terrain_type_key": self.overlay_terrain_type.key,
            "resource_key": self.resource.key,
            "is_snow_capped": self.is_snow_capped,
            "is_pine_forest": self.is_pine_forest,
            "river_northeast": self.river_northeast,
            "river_southeast": self.river_southeast,
            "river_southwest": self.river_southwest,
            "river_northwest": self.river_northwest,
            "extra_info": self.extra_info.to_dict() if self.extra_info is not None else None,
        }

    def __repr__(self) -> str:
        return f"Tile({self.x}, {self.y}, {self.base_terrain_type.key}/{self.overlay_terrain_type.key})"


class Map:
    """Staggered width x height tile grid.

    Tiles are stored in index order; ``tiles[i]`` sits at
    ``get_map_coordinates(i, num_tiles_wide)``. Dimensions stay ``None``
    until a map header sets them.
    """

    def __init__(
        self,
        num_tiles_wide: Optional[int] = None,
        num_tiles_tall: Optional[int] = None,
        wrap_horizontally: bool = False,
        wrap_vertically: bool = False,
    ) -> None:
        self.num_tiles_wide = num_tiles_wide
        self.num_tiles_tall = num_tiles_tall
        self.wrap_horizontally = wrap_horizontally
        self.wrap_vertically = wrap_vertically
        self.tiles: List[Tile] = []
        self._by_coordinates: Dict[Tuple[int, int], Tile] = {}

    @property
    def has_dimensions(self) -> bool:
        return bool(self.num_tiles_wide) and bool(self.num_tiles_tall)

    def set_dimensions(self, width: int, height: int) -> None:
        self.num_tiles_wide = width
        self.num_tiles_tall = height

    def is_within(self, x: int, y: int) -> bool:
        if not self.has_dimensions:
            return False
        return 0 <= x < self.num_tiles_wide and 0 <= y < self.num_tiles_tall

    def add_tile(self, tile: Tile) -> None:
        """Append a tile in index order.

        Raises IndexError when the tile lies outside the declared dimensions
        or its coordinates are already taken.
        """
        if self.has_dimensions and not self.is_within(tile.x, tile.y):
            raise IndexError(
                f"Tile ({tile.x}, {tile.y}) outside map {self.num_tiles_wide}x{self.num_tiles_tall}"
            )
        if tile.coordinates in self._by_coordinates:
            raise IndexError(f"Duplicate tile at ({tile.x}, {tile.y})")
        self.tiles.append(tile)
        self._by_coordinates[tile.coordinates] = tile

    def tile_at(self, x: int, y: int) -> Optional[Tile]:
        """Return the tile at (x, y), or None when there is none. Never raises."""
        return self._by_coordinates.get((x, y))

    def tile_index(self, tile: Tile) -> int:
        return get_tile_index(tile.x, tile.y, self.num_tiles_wide)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def _wrap(self, x: int, y: int) -> Tuple[int, int]:
        if self.wrap_horizontally and self.num_tiles_wide:
            x %= self.num_tiles_wide
        if self.wrap_vertically and self.num_tiles_tall:
            y %= self.num_tiles_tall
        return x, y

    def neighbor_of(self, tile: Tile, direction: TileDirection) -> Optional[Tile]:
        x, y = self._wrap(tile.x + direction.dx, tile.y + direction.dy)
        if (x, y) == tile.coordinates:
            return None
        return self.tile_at(x, y)

    def compute_neighbors(self) -> None:
        """Rebuild every tile's neighbor links from the grid geometry."""
        for tile in self.tiles:
            tile.neighbors = {}
            for direction in TileDirection:
                other = self.neighbor_of(tile, direction)
                if other is not None:
                    tile.neighbors[direction] = other
        logger.debug("Computed neighbors for %d tiles", len(self.tiles))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num_tiles_wide": self.num_tiles_wide,
            "num_tiles_tall": self.num_tiles_tall,
            "wrap_horizontally": self.wrap_horizontally,
            "wrap_vertically": self.wrap_vertically,
            "tiles": [t.to_dict() for t in self.tiles],
        }
