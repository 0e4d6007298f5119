from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..errors import CorruptSaveError
from ..models import GameData
from ..settings import Settings
from .codec import SAVE_VERSION, decode_save, encode_save
from .containers import get_compression, read_payload, write_payload
from .inflation import inflate_game_data

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(eq=False)
class SaveFormat:
    """A complete game-state snapshot plus the version tag it is saved under."""

    game_data: GameData = field(default_factory=GameData)
    version: str = SAVE_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {"version": self.version, "game_data": self.game_data.to_dict()}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SaveFormat":
        """Build a resolved snapshot from a decoded save tree."""
        return SaveFormat(
            game_data=inflate_game_data(data["game_data"]),
            version=str(data.get("version", "")),
        )

    @classmethod
    def load(cls, path: PathLike) -> "SaveFormat":
        return load(path)

    def save(self, path: PathLike, settings: Optional[Settings] = None) -> None:
        save(self, path, settings)


def load(path: PathLike) -> SaveFormat:
    """Read a .json or .zip save and return a new, fully inflated snapshot."""
    path = Path(path)
    compression = get_compression(path)
    payload = read_payload(path, compression)
    data = decode_save(payload)
    try:
        snapshot = SaveFormat.from_dict(data)
    except CorruptSaveError:
        logger.error("Save %s is corrupt", path)
        raise
    logger.info(
        "Loaded save %s (version %s, %d tiles)", path, snapshot.version, len(snapshot.game_data.map.tiles)
    )
    return snapshot


def save(snapshot: SaveFormat, path: PathLike, settings: Optional[Settings] = None) -> None:
    """Write ``snapshot`` to ``path``; the extension picks the container.

    Without ``settings`` the packaged defaults from ``Settings.load()`` apply.
    """
    path = Path(path)
    compression = get_compression(path)
    persistence = (settings or Settings.load()).persistence
    payload = encode_save(snapshot.to_dict(), indent=persistence.indent)
    write_payload(path, payload, compression, compression_level=persistence.compression_level)
    logger.info("Saved %s (%s, %d bytes uncompressed)", path, compression.name, len(payload))
