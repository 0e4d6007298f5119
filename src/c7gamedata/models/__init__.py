"""In-memory game-state model.

Entities hold direct references to each other; their ``to_dict`` forms
replace those references with keys so the persisted tree has no cycles.
"""

from .terrain import TerrainType
from .resource import NONE_KEY, Resource, ResourceCategory
from .map import Civ3ExtraInfo, Map, Tile, TileDirection
from .units import BarbarianInfo, ExperienceLevel, MapUnit, UnitPrototype
from .game_data import GameData

__all__ = [
    "TerrainType",
    "NONE_KEY",
    "Resource",
    "ResourceCategory",
    "Civ3ExtraInfo",
    "Map",
    "Tile",
    "TileDirection",
    "BarbarianInfo",
    "ExperienceLevel",
    "MapUnit",
    "UnitPrototype",
    "GameData",
]
