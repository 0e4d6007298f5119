from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class PersistenceSettings:
    indent: int = 2
    compression_level: int = 6
    default_extension: str = ".zip"
    save_dir: Optional[str] = None


@dataclass
class ImportSettings:
    default_biq_path: Optional[str] = None


@dataclass
class Settings:
    persistence: PersistenceSettings = field(default_factory=PersistenceSettings)
    import_: ImportSettings = field(default_factory=ImportSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        persistence = PersistenceSettings(**(data.get("persistence") or {}))
        import_ = ImportSettings(**(data.get("import") or {}))
        return Settings(persistence=persistence, import_=import_)

    def to_dict(self) -> dict:
        # "import" is a keyword, hence the trailing underscore on the attribute only
        return {
            "persistence": dataclasses.asdict(self.persistence),
            "import": dataclasses.asdict(self.import_),
        }

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("c7gamedata.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = Settings().to_dict()

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)
