"""Rebuild a resolved GameData from a decoded save tree.

Decoding yields a plain dict in which cross references are stored as keys
(resources, terrain types, experience levels, unit prototypes) or tile
coordinates. ``inflate_game_data`` turns that tree into entities holding
direct references, then recomputes tile neighbors, which are never saved.
An unresolved reference or a malformed entity (not an object, or a tile away
from its grid position) raises CorruptSaveError; nothing partially built
escapes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, TypeVar

from ..civ3.coordinates import get_map_coordinates
from ..errors import CorruptSaveError
from ..models import (
    NONE_KEY,
    BarbarianInfo,
    Civ3ExtraInfo,
    ExperienceLevel,
    GameData,
    Map,
    MapUnit,
    Resource,
    TerrainType,
    Tile,
    UnitPrototype,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _lookup(table: Mapping[str, T], key: Any, what: str, owner: str) -> T:
    try:
        return table[key]
    except (KeyError, TypeError):
        raise CorruptSaveError(f"{owner} refers to unknown {what} {key!r}") from None


def _require_dict(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise CorruptSaveError(f"{what} is not an object: {data!r}")
    return data


def _index_by_key(items: List[T], key_attr: str, what: str) -> Dict[str, T]:
    table: Dict[str, T] = {}
    for item in items:
        key = getattr(item, key_attr)
        if key in table:
            raise CorruptSaveError(f"Duplicate {what} key {key!r}")
        table[key] = item
    return table


def _inflate_tile(
    data: Dict[str, Any],
    terrain_by_key: Mapping[str, TerrainType],
    resources_by_key: Mapping[str, Resource],
) -> Tile:
    _require_dict(data, "Tile")
    owner = f"Tile ({data.get('x')}, {data.get('y')})"
    resource_key = data.get("resource_key", NONE_KEY)
    if resource_key == NONE_KEY:
        resource = Resource.NONE
    else:
        resource = _lookup(resources_by_key, resource_key, "resource", owner)
    extra = data.get("extra_info")
    return Tile(
        x=int(data["x"]),
        y=int(data["y"]),
        base_terrain_type=_lookup(terrain_by_key, data.get("base_terrain_type_key"), "terrain type", owner),
        overlay_terrain_type=_lookup(terrain_by_key, data.get("overlay_terrain_type_key"), "terrain type", owner),
        resource=resource,
        is_snow_capped=bool(data.get("is_snow_capped", False)),
        is_pine_forest=bool(data.get("is_pine_forest", False)),
        river_northeast=bool(data.get("river_northeast", False)),
        river_southeast=bool(data.get("river_southeast", False)),
        river_southwest=bool(data.get("river_southwest", False)),
        river_northwest=bool(data.get("river_northwest", False)),
        extra_info=Civ3ExtraInfo.from_dict(extra) if isinstance(extra, dict) else None,
    )


def _inflate_map(
    data: Dict[str, Any],
    terrain_by_key: Mapping[str, TerrainType],
    resources_by_key: Mapping[str, Resource],
) -> Map:
    game_map = Map(
        num_tiles_wide=data.get("num_tiles_wide"),
        num_tiles_tall=data.get("num_tiles_tall"),
        wrap_horizontally=bool(data.get("wrap_horizontally", False)),
        wrap_vertically=bool(data.get("wrap_vertically", False)),
    )
    for i, tile_data in enumerate(data.get("tiles", [])):
        tile = _inflate_tile(tile_data, terrain_by_key, resources_by_key)
        if game_map.has_dimensions:
            expected = get_map_coordinates(i, game_map.num_tiles_wide)
            if tile.coordinates != expected:
                raise CorruptSaveError(
                    f"Tile {i} is stored at ({tile.x}, {tile.y}); its grid position is {expected}"
                )
        try:
            game_map.add_tile(tile)
        except IndexError as e:
            raise CorruptSaveError(str(e)) from e
    return game_map


def _inflate_unit(
    data: Dict[str, Any],
    game_map: Map,
    prototypes: Mapping[str, UnitPrototype],
    levels_by_key: Mapping[str, ExperienceLevel],
) -> MapUnit:
    _require_dict(data, "Map unit")
    owner = f"Unit {data.get('id')!r}"
    location: Optional[Tile] = None
    x, y = data.get("location_x"), data.get("location_y")
    if x is not None and y is not None:
        location = game_map.tile_at(x, y)
        if location is None:
            raise CorruptSaveError(f"{owner} is located at ({x}, {y}), which is not a map tile")
    return MapUnit(
        id=str(data["id"]),
        unit_type=_lookup(prototypes, data.get("unit_type_key"), "unit prototype", owner),
        experience_level=_lookup(levels_by_key, data.get("experience_level_key"), "experience level", owner),
        location=location,
        hit_points_remaining=int(data.get("hit_points_remaining", 3)),
        movement_points_remaining=float(data.get("movement_points_remaining", 0.0)),
    )


def _inflate_barbarian_info(
    data: Optional[Dict[str, Any]], prototypes: Mapping[str, UnitPrototype]
) -> Optional[BarbarianInfo]:
    if data is None:
        return None
    _require_dict(data, "Barbarian info")
    owner = "Barbarian info"
    return BarbarianInfo(
        basic_barbarian=_lookup(prototypes, data.get("basic_barbarian_key"), "unit prototype", owner),
        advanced_barbarian=_lookup(prototypes, data.get("advanced_barbarian_key"), "unit prototype", owner),
        barbarian_sea_unit=_lookup(prototypes, data.get("barbarian_sea_unit_key"), "unit prototype", owner),
    )


def inflate_game_data(raw: Dict[str, Any]) -> GameData:
    """Build a fully resolved GameData from a decoded, migrated save tree."""
    try:
        terrain_types = [TerrainType.from_dict(t) for t in raw.get("terrain_types", [])]
        resources = [Resource.from_dict(r) for r in raw.get("resources", [])]
        levels = [ExperienceLevel.from_dict(e) for e in raw.get("experience_levels", [])]
        prototype_list = [UnitPrototype.from_dict(p) for p in raw.get("unit_prototypes", [])]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise CorruptSaveError(f"Malformed entity in save: {e!r}") from e

    terrain_by_key = _index_by_key(terrain_types, "key", "terrain type")
    resources_by_key = _index_by_key(resources, "key", "resource")
    levels_by_key = _index_by_key(levels, "key", "experience level")
    prototypes = _index_by_key(prototype_list, "name", "unit prototype")

    try:
        game_map = _inflate_map(raw.get("map") or {}, terrain_by_key, resources_by_key)
        units = [_inflate_unit(u, game_map, prototypes, levels_by_key) for u in raw.get("map_units", [])]
        turn = int(raw.get("turn", 0))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise CorruptSaveError(f"Malformed game data in save: {e!r}") from e

    default_key = raw.get("default_experience_level_key")
    default_level = None
    if default_key is not None:
        default_level = _lookup(levels_by_key, default_key, "experience level", "Default experience level")

    game_data = GameData(
        terrain_types=terrain_types,
        resources=resources,
        map=game_map,
        experience_levels=levels,
        default_experience_level=default_level,
        unit_prototypes=prototypes,
        map_units=units,
        barbarian_info=_inflate_barbarian_info(raw.get("barbarian_info"), prototypes),
        turn=turn,
    )
    game_map.compute_neighbors()
    logger.debug(
        "Inflated %d tiles, %d units, %d unit prototypes",
        len(game_map.tiles),
        len(units),
        len(prototypes),
    )
    return game_data
