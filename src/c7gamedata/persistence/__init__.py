"""Persistence of game-state snapshots.

This package provides:
- SaveFormat, the versioned snapshot root, with load() and save()
- camelCase JSON encoding with version migration hooks
- .json (plain) and .zip (single "save" entry) containers
- Reference inflation that rebuilds direct references after decoding
"""

from .codec import KNOWN_VERSIONS, SAVE_VERSION, decode_save, encode_save, migrate_data
from .containers import SAVE_ENTRY_NAME, SaveCompression, get_compression
from .inflation import inflate_game_data
from .save_format import SaveFormat, load, save

__all__ = [
    "KNOWN_VERSIONS",
    "SAVE_VERSION",
    "decode_save",
    "encode_save",
    "migrate_data",
    "SAVE_ENTRY_NAME",
    "SaveCompression",
    "get_compression",
    "inflate_game_data",
    "SaveFormat",
    "load",
    "save",
]
