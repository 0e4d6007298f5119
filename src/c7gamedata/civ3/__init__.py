"""Civ3 scenario (BIQ) and save (SAV) import."""

from .coordinates import get_map_coordinates, get_tile_index
from .records import (
    BiqData,
    GoodRecord,
    RecordReader,
    SavData,
    TerrRecord,
    TileRecord,
    WmapRecord,
    WrldRecord,
)

__all__ = [
    "get_map_coordinates",
    "get_tile_index",
    "BiqData",
    "GoodRecord",
    "RecordReader",
    "SavData",
    "TerrRecord",
    "TileRecord",
    "WmapRecord",
    "WrldRecord",
]
