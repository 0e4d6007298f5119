"""Save file containers, chosen purely by file extension.

``.json`` holds the payload as-is; ``.zip`` holds it as the single archive
entry named ``save``.
"""

from __future__ import annotations

import io
import logging
import zipfile
from enum import Enum
from pathlib import Path
from typing import Union

from ..errors import CorruptSaveError, InvalidSaveFormatError
from ..utils.fs import atomic_write_bytes

logger = logging.getLogger(__name__)

SAVE_ENTRY_NAME = "save"


class SaveCompression(Enum):
    NONE = ".json"
    ZIP = ".zip"


def get_compression(path: Union[str, Path]) -> SaveCompression:
    """Return the container for ``path``. Performs no I/O."""
    ext = Path(path).suffix.lower()
    for compression in SaveCompression:
        if compression.value == ext:
            return compression
    raise InvalidSaveFormatError(
        f"Unrecognized save extension {ext!r} for {path}; expected one of "
        f"{', '.join(c.value for c in SaveCompression)}"
    )


def read_payload(path: Path, compression: SaveCompression) -> bytes:
    if compression is SaveCompression.NONE:
        return path.read_bytes()
    try:
        with zipfile.ZipFile(path, "r") as archive:
            return archive.read(SAVE_ENTRY_NAME)
    except zipfile.BadZipFile as e:
        raise CorruptSaveError(f"{path} is not a valid zip archive: {e}") from e
    except KeyError as e:
        raise CorruptSaveError(f"{path} has no '{SAVE_ENTRY_NAME}' entry") from e


def pack_archive(payload: bytes, compression_level: int = 6) -> bytes:
    """Build a single-entry zip archive in memory."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=compression_level) as archive:
        archive.writestr(SAVE_ENTRY_NAME, payload)
    return buffer.getvalue()


def write_payload(path: Path, payload: bytes, compression: SaveCompression, compression_level: int = 6) -> None:
    if compression is SaveCompression.ZIP:
        payload = pack_archive(payload, compression_level)
    atomic_write_bytes(path, payload)
    logger.debug("Wrote %d bytes to %s", len(payload), path)
