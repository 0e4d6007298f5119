from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from ..errors import CorruptSaveError
from .naming import camelize_keys, snakify_keys

logger = logging.getLogger(__name__)

# Free-text tag written into every save
SAVE_VERSION = "v0.1-python"
# Tags this codec reads without complaint; older ones may need migrate_data
KNOWN_VERSIONS = ("v0.0early-prototype", SAVE_VERSION)

_BARBARIAN_FIELDS = ("basic_barbarian", "advanced_barbarian", "barbarian_sea_unit")
# Collections stored keyed by game data rather than by field name
_DATA_KEYED_FIELDS = frozenset({"unit_prototypes"})


def encode_save(data: Dict[str, Any], indent: int = 2) -> bytes:
    """Encode a snapshot dict as pretty-printed camelCase JSON bytes."""
    return json.dumps(camelize_keys(data), ensure_ascii=False, indent=indent).encode("utf-8")


def decode_save(payload: bytes) -> Dict[str, Any]:
    """Decode JSON bytes into a snake_case snapshot dict, migrated to the current layout."""
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CorruptSaveError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("gameData"), dict):
        raise CorruptSaveError("Save payload has no gameData object")
    return migrate_data(snakify_keys(data, _DATA_KEYED_FIELDS))


def migrate_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Bring older save layouts up to the current one.

    The version tag is not a compatibility gate: unknown tags are logged and
    the payload is read as-is.
    """
    version = data.get("version")
    if version not in KNOWN_VERSIONS:
        logger.warning("Unknown save version %r; attempting to load anyway", version)

    game_data = data["game_data"]
    prototypes = game_data.get("unit_prototypes")
    if isinstance(prototypes, dict):
        prototypes = game_data["unit_prototypes"] = _prototype_list(prototypes)
    barbarians = game_data.get("barbarian_info")
    if isinstance(barbarians, dict):
        game_data["barbarian_info"] = _migrate_barbarian_indices(barbarians, prototypes if isinstance(prototypes, list) else [])
    return data


def _prototype_list(by_name: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Flatten the early name-keyed prototype object into the current list, keeping value order."""
    prototypes = []
    for name, entry in by_name.items():
        if not isinstance(entry, dict):
            raise CorruptSaveError(f"Unit prototype {name!r} is not an object")
        entry = dict(entry)
        entry.setdefault("name", name)
        prototypes.append(entry)
    return prototypes


def _migrate_barbarian_indices(info: Dict[str, Any], prototypes: List[Any]) -> Dict[str, Any]:
    """Rewrite positional barbarian prototype references into prototype keys.

    Early saves stored each barbarian unit as an index into the prototype
    collection's value order.
    """
    migrated = dict(info)
    for name in _BARBARIAN_FIELDS:
        key_field, index_field = f"{name}_key", f"{name}_index"
        if key_field in migrated or index_field not in migrated:
            continue
        index = migrated.pop(index_field)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(prototypes):
            raise CorruptSaveError(f"Barbarian {name} index {index!r} is outside the unit prototypes")
        prototype = prototypes[index]
        if not isinstance(prototype, dict):
            raise CorruptSaveError(f"Unit prototype at index {index} is not an object")
        migrated[key_field] = prototype.get("name")
        logger.info("Migrated barbarian %s from index %d to key %r", name, index, migrated[key_field])
    return migrated
