from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from platformdirs import PlatformDirs

from .settings import Settings
from .utils.fs import ensure_dir

__all__ = [
    "APP_NAME",
    "APP_AUTHOR",
    "get_save_dir",
    "default_save_path",
]

APP_NAME = "C7"
APP_AUTHOR = "C7Engine"

_logger = logging.getLogger(__name__)


def _dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR)


def get_save_dir(settings: Optional[Settings] = None, create: bool = True) -> Path:
    """Return directory for save files.

    A ``persistence.save_dir`` setting wins over the platform data directory.
    """
    if settings is not None and settings.persistence.save_dir:
        root = Path(settings.persistence.save_dir).expanduser()
    else:
        root = Path(_dirs().user_data_dir) / "saves"
    if create:
        ensure_dir(root)
    return root


def default_save_path(name: str, settings: Optional[Settings] = None) -> Path:
    """Return ``<save dir>/<name><default extension>`` for a save slot name."""
    settings = settings or Settings.load()
    path = get_save_dir(settings) / f"{name}{settings.persistence.default_extension}"
    _logger.debug("Resolved save path for %r: %s", name, path)
    return path
