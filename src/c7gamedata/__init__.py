"""c7gamedata: game-state persistence and Civ3 import for the C7 engine."""

__version__ = "0.1.0"

from .errors import (
    C7DataError,
    Civ3ImportError,
    CorruptDataError,
    CorruptSaveError,
    InvalidSaveFormatError,
    MapDimensionError,
    SaveError,
)
from .models import GameData
from .persistence import SaveFormat, load, save
from .civ3.importer import Civ3Importer, import_biq, import_sav

__all__ = [
    "C7DataError",
    "Civ3ImportError",
    "CorruptDataError",
    "CorruptSaveError",
    "InvalidSaveFormatError",
    "MapDimensionError",
    "SaveError",
    "GameData",
    "SaveFormat",
    "load",
    "save",
    "Civ3Importer",
    "import_biq",
    "import_sav",
]
