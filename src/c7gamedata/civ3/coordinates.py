"""Staggered (brick-pattern) tile coordinates used by Civ3 maps.

Row ``y`` holds ``width // 2`` tiles; odd rows are shifted one column to the
right, so every tile satisfies ``(x + y) % 2 == 0``.
"""

from typing import Tuple


def _half_width(width: int) -> int:
    if width <= 0 or width % 2:
        raise ValueError(f"Map width must be even and positive, got {width}")
    return width // 2


def get_map_coordinates(tile_index: int, map_width: int) -> Tuple[int, int]:
    """Return the (x, y) grid position of the tile at ``tile_index``."""
    half = _half_width(map_width)
    y = tile_index // half
    x = (tile_index % half) * 2 + (y % 2)
    return x, y


def get_tile_index(x: int, y: int, map_width: int) -> int:
    """Inverse of get_map_coordinates."""
    half = _half_width(map_width)
    if (x + y) % 2:
        raise ValueError(f"({x}, {y}) is not a tile position on a staggered grid")
    return y * half + x // 2
