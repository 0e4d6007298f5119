class C7DataError(Exception):
    """Base exception for the c7gamedata package."""


class SaveError(C7DataError):
    """Base exception for save/load errors."""


class InvalidSaveFormatError(SaveError, ValueError):
    """Raised when a save path has an extension that maps to no known container."""


class CorruptSaveError(SaveError):
    """Raised when save data cannot be decoded or a persisted reference does not resolve."""


class Civ3ImportError(C7DataError):
    """Base exception for Civ3 scenario/save import failures."""


class CorruptDataError(Civ3ImportError):
    """Raised when a Civ3 record refers to an id outside its owning collection."""


class MapDimensionError(Civ3ImportError):
    """Raised when tiles are imported before the map dimensions are known."""
