"""Typed Civ3 records as supplied by the binary record reader.

The reader itself (BIQ/SAV byte parsing) lives outside this package; it is
plugged into the importer through the ``RecordReader`` protocol and must
hand back these dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class TerrRecord:
    name: str
    food: int = 0
    shields: int = 0
    commerce: int = 0
    movement_cost: int = 1
    allow_cities: bool = True


@dataclass(frozen=True)
class GoodRecord:
    name: str
    icon: int = 0
    # 0 bonus, 1 luxury, 2 strategic
    type: int = 0
    food_bonus: int = 0
    shields_bonus: int = 0
    commerce_bonus: int = 0
    appearance_ratio: int = 0
    disappearance_probability: int = 0
    civilopedia_entry: str = ""


@dataclass(frozen=True)
class TileRecord:
    base_terrain: int
    overlay_terrain: int
    resource_id: int = -1
    snow_capped: bool = False
    pine_forest: bool = False
    river_northeast: bool = False
    river_southeast: bool = False
    river_southwest: bool = False
    river_northwest: bool = False
    texture_file: int = 0
    texture_location: int = 0


@dataclass(frozen=True)
class WmapRecord:
    """Scenario map header."""

    width: int
    height: int


@dataclass(frozen=True)
class WrldRecord:
    """Live-game world header of a save file."""

    width: int
    height: int


@dataclass
class BiqData:
    terr: Sequence[TerrRecord] = field(default_factory=list)
    good: Sequence[GoodRecord] = field(default_factory=list)
    tile: Sequence[TileRecord] = field(default_factory=list)
    wmap: Sequence[WmapRecord] = field(default_factory=list)


@dataclass
class SavData:
    # Rules/map tables, filled from the default BIQ for sections the save omits
    bic: BiqData
    tile: Sequence[TileRecord] = field(default_factory=list)
    wrld: Optional[WrldRecord] = None


class RecordReader(Protocol):
    def read_biq(self, data: bytes) -> BiqData:
        ...

    def read_sav(self, data: bytes, default_biq: bytes) -> SavData:
        ...
