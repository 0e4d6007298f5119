"""Import Civ3 scenarios (BIQ) and saves (SAV) into the native game-state model.

Both entry points run the same fixed sequence: terrain types, resources,
map dimensions, then tiles. Tile import needs the terrain and resource
lookups built by the earlier steps, and any unresolvable id aborts the
whole import.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from ..errors import Civ3ImportError, CorruptDataError, MapDimensionError
from ..models import (
    Civ3ExtraInfo,
    GameData,
    Resource,
    ResourceCategory,
    TerrainType,
    Tile,
)
from ..persistence.save_format import SaveFormat
from ..settings import Settings
from .coordinates import get_map_coordinates
from .records import BiqData, GoodRecord, RecordReader, SavData, TerrRecord, TileRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_CATEGORY_BY_CODE: Dict[int, ResourceCategory] = {
    0: ResourceCategory.BONUS,
    1: ResourceCategory.LUXURY,
    2: ResourceCategory.STRATEGIC,
}


def import_terrain_types(terrain_records: Sequence[TerrRecord], game_data: GameData) -> None:
    for civ3_index, terr in enumerate(terrain_records):
        game_data.terrain_types.append(TerrainType.import_from_civ3(civ3_index, terr))
    logger.debug("Imported %d terrain types", len(game_data.terrain_types))


def resource_category(code: int, good: Optional[GoodRecord] = None) -> ResourceCategory:
    """Map a Civ3 good type code to a category; unknown codes become NONE."""
    category = _CATEGORY_BY_CODE.get(code)
    if category is None:
        logger.warning("Unknown resource category %r for %s", code, good)
        return ResourceCategory.NONE
    return category


def import_resources(good_records: Sequence[GoodRecord], game_data: GameData) -> Dict[int, Resource]:
    """Create one Resource per GOOD record.

    Returns the Civ3 resource id -> Resource map used by tile import, with
    -1 mapped to ``Resource.NONE``.
    """
    resources_by_index: Dict[int, Resource] = {-1: Resource.NONE}
    for index, good in enumerate(good_records):
        resource = Resource(
            key=good.name,
            index=index,
            name=good.name,
            icon=good.icon,
            category=resource_category(good.type, good),
            food_bonus=good.food_bonus,
            shields_bonus=good.shields_bonus,
            commerce_bonus=good.commerce_bonus,
            appearance_ratio=good.appearance_ratio,
            disappearance_ratio=good.disappearance_probability,
            civilopedia_entry=good.civilopedia_entry,
        )
        game_data.resources.append(resource)
        resources_by_index[index] = resource
    logger.debug("Imported %d resources", len(game_data.resources))
    return resources_by_index


def set_map_dimensions(save: Optional[SavData], biq: Optional[BiqData], game_data: GameData) -> None:
    """Size the map from the scenario header, overridden by the live-game header.

    A save in progress may have a different map size than the scenario it
    started from, so a valid WRLD header always wins over WMAP.
    """
    if biq is not None and biq.wmap:
        header = biq.wmap[0]
        if header.width > 0 and header.height > 0:
            game_data.map.set_dimensions(header.width, header.height)
    if save is not None and save.wrld is not None:
        if save.wrld.width > 0 and save.wrld.height > 0:
            game_data.map.set_dimensions(save.wrld.width, save.wrld.height)
    if not game_data.map.has_dimensions:
        logger.warning("No map header with positive dimensions; map size left unset")


def _terrain_by_id(game_data: GameData, terrain_id: int, tile_index: int) -> TerrainType:
    if not 0 <= terrain_id < len(game_data.terrain_types):
        raise CorruptDataError(
            f"Tile {tile_index} refers to terrain id {terrain_id}; "
            f"only {len(game_data.terrain_types)} terrain types exist"
        )
    return game_data.terrain_types[terrain_id]


def import_tiles(
    tile_records: Sequence[TileRecord],
    game_data: GameData,
    resources_by_index: Dict[int, Resource],
) -> None:
    game_map = game_data.map
    if not game_map.has_dimensions:
        raise MapDimensionError("Map dimensions must be set before importing tiles")
    if game_map.num_tiles_wide % 2:
        raise MapDimensionError(f"Map width must be even, got {game_map.num_tiles_wide}")

    for i, record in enumerate(tile_records):
        x, y = get_map_coordinates(i, game_map.num_tiles_wide)
        try:
            resource = resources_by_index[record.resource_id]
        except KeyError:
            raise CorruptDataError(f"Tile {i} refers to unknown resource id {record.resource_id}") from None
        tile = Tile(
            x=x,
            y=y,
            extra_info=Civ3ExtraInfo(
                base_terrain_file_id=record.texture_file,
                base_terrain_image_id=record.texture_location,
            ),
            base_terrain_type=_terrain_by_id(game_data, record.base_terrain, i),
            overlay_terrain_type=_terrain_by_id(game_data, record.overlay_terrain, i),
            resource=resource,
        )
        if record.snow_capped:
            tile.is_snow_capped = True
        if record.pine_forest:
            tile.is_pine_forest = True
        tile.river_northeast = record.river_northeast
        tile.river_southeast = record.river_southeast
        tile.river_southwest = record.river_southwest
        tile.river_northwest = record.river_northwest
        try:
            game_map.add_tile(tile)
        except IndexError as e:
            raise CorruptDataError(f"Tile {i}: {e}") from e
    logger.debug("Imported %d tiles", len(game_map.tiles))


class Civ3Importer:
    """Builds a fresh SaveFormat from Civ3 files, one per call."""

    def __init__(self, reader: RecordReader, settings: Optional[Settings] = None) -> None:
        self.reader = reader
        self.settings = settings or Settings.load()

    def import_sav(self, save_path: PathLike, default_biq_path: Optional[PathLike] = None) -> SaveFormat:
        """Import an in-progress Civ3 save.

        Terrain and resource tables come from the rules the reader attaches
        to the save (the default BIQ fills sections the save omits); tiles
        always come from the save itself. Without ``default_biq_path`` the
        ``import.default_biq_path`` setting is used.
        """
        if default_biq_path is None:
            default_biq_path = self.settings.import_.default_biq_path
        if default_biq_path is None:
            raise Civ3ImportError("No default BIQ given and import.default_biq_path is not configured")
        logger.info("Importing Civ3 save %s (default rules %s)", save_path, default_biq_path)
        default_biq_bytes = Path(default_biq_path).read_bytes()
        civ3_save = self.reader.read_sav(Path(save_path).read_bytes(), default_biq_bytes)
        biq = civ3_save.bic

        save_format = SaveFormat()
        game_data = save_format.game_data
        import_terrain_types(biq.terr, game_data)
        resources_by_index = import_resources(biq.good, game_data)
        set_map_dimensions(civ3_save, biq, game_data)
        import_tiles(civ3_save.tile, game_data, resources_by_index)
        game_data.map.compute_neighbors()
        self._log_summary(save_path, game_data)
        return save_format

    def import_biq(self, biq_path: PathLike) -> SaveFormat:
        """Import a Civ3 scenario as its initial game state."""
        logger.info("Importing Civ3 scenario %s", biq_path)
        biq = self.reader.read_biq(Path(biq_path).read_bytes())

        save_format = SaveFormat()
        game_data = save_format.game_data
        import_terrain_types(biq.terr, game_data)
        resources_by_index = import_resources(biq.good, game_data)
        set_map_dimensions(None, biq, game_data)
        import_tiles(biq.tile, game_data, resources_by_index)
        game_data.map.compute_neighbors()
        self._log_summary(biq_path, game_data)
        return save_format

    @staticmethod
    def _log_summary(path: PathLike, game_data: GameData) -> None:
        logger.info(
            "Imported %s: %dx%d map, %d tiles, %d terrain types, %d resources",
            path,
            game_data.map.num_tiles_wide,
            game_data.map.num_tiles_tall,
            len(game_data.map.tiles),
            len(game_data.terrain_types),
            len(game_data.resources),
        )


def import_sav(save_path: PathLike, default_biq_path: Optional[PathLike], reader: RecordReader) -> SaveFormat:
    return Civ3Importer(reader).import_sav(save_path, default_biq_path)


def import_biq(biq_path: PathLike, reader: RecordReader) -> SaveFormat:
    return Civ3Importer(reader).import_biq(biq_path)
