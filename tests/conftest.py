import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from c7gamedata.civ3.records import (  # noqa: E402
    BiqData,
    GoodRecord,
    SavData,
    TerrRecord,
    TileRecord,
    WmapRecord,
    WrldRecord,
)
from c7gamedata.models import (  # noqa: E402
    BarbarianInfo,
    Civ3ExtraInfo,
    ExperienceLevel,
    GameData,
    Map,
    MapUnit,
    Resource,
    ResourceCategory,
    TerrainType,
    Tile,
    UnitPrototype,
)
from c7gamedata.persistence import SaveFormat  # noqa: E402


class FakeReader:
    """Record reader double: hands back prepared records and remembers what it was given."""

    def __init__(self, biq: BiqData = None, sav: SavData = None) -> None:
        self.biq = biq
        self.sav = sav
        self.calls = []

    def read_biq(self, data: bytes) -> BiqData:
        self.calls.append(("biq", data))
        return self.biq

    def read_sav(self, data: bytes, default_biq: bytes) -> SavData:
        self.calls.append(("sav", data, default_biq))
        return self.sav


TERRAIN_RECORDS = [
    TerrRecord(name="Desert", food=0, shields=1, commerce=0),
    TerrRecord(name="Plains", food=1, shields=1, commerce=0),
    TerrRecord(name="Grassland", food=2, shields=0, commerce=0),
    TerrRecord(name="Mountains", food=0, shields=1, commerce=0, movement_cost=3, allow_cities=False),
]

GOOD_RECORDS = [
    GoodRecord(name="Wheat", icon=1, type=0, food_bonus=2),
    GoodRecord(name="Wines", icon=2, type=1, commerce_bonus=1),
    GoodRecord(name="Iron", icon=3, type=2, shields_bonus=1, appearance_ratio=160, disappearance_probability=1000),
]


def make_tile_records(count: int, resource_ids=None):
    resource_ids = resource_ids or [-1] * count
    return [
        TileRecord(
            base_terrain=i % len(TERRAIN_RECORDS),
            overlay_terrain=(i + 1) % len(TERRAIN_RECORDS),
            resource_id=resource_ids[i],
            snow_capped=(i == 0),
            pine_forest=(i == 1),
            river_northeast=(i % 2 == 0),
            river_southwest=True,
            texture_file=i // 2,
            texture_location=i,
        )
        for i in range(count)
    ]


@pytest.fixture
def scenario_biq() -> BiqData:
    # 4x4 staggered map holds 2 tiles per row
    return BiqData(
        terr=list(TERRAIN_RECORDS),
        good=list(GOOD_RECORDS),
        tile=make_tile_records(8, [-1, 0, 1, 2, -1, -1, 0, -1]),
        wmap=[WmapRecord(width=4, height=4)],
    )


@pytest.fixture
def live_sav(scenario_biq: BiqData) -> SavData:
    # The game grew the map to 6x4 after the scenario was authored
    return SavData(
        bic=scenario_biq,
        tile=make_tile_records(12, [2] + [-1] * 11),
        wrld=WrldRecord(width=6, height=4),
    )


def build_game_data(width: int = 4, height: int = 4) -> GameData:
    """A small hand-built snapshot exercising every persisted reference."""
    gd = GameData(turn=12)
    gd.terrain_types = [TerrainType.import_from_civ3(i, t) for i, t in enumerate(TERRAIN_RECORDS)]
    gd.resources = [
        Resource(key="Wheat", index=0, name="Wheat", category=ResourceCategory.BONUS, food_bonus=2),
        Resource(key="Iron", index=1, name="Iron", category=ResourceCategory.STRATEGIC, shields_bonus=1),
    ]
    gd.map = Map(num_tiles_wide=width, num_tiles_tall=height, wrap_horizontally=True)
    for i in range(width // 2 * height):
        y = i // (width // 2)
        x = (i % (width // 2)) * 2 + (y % 2)
        resource = gd.resources[i % 2] if i % 3 == 0 else Resource.NONE
        gd.map.add_tile(
            Tile(
                x=x,
                y=y,
                base_terrain_type=gd.terrain_types[i % 4],
                overlay_terrain_type=gd.terrain_types[3 - i % 4],
                resource=resource,
                is_pine_forest=(i == 2),
                river_southeast=(i % 2 == 1),
                extra_info=Civ3ExtraInfo(base_terrain_file_id=i % 3, base_terrain_image_id=i),
            )
        )
    gd.map.compute_neighbors()

    gd.experience_levels = [
        ExperienceLevel(key="CONSCRIPT", display_name="Conscript", base_hit_points=2),
        ExperienceLevel(key="REGULAR", display_name="Regular", base_hit_points=3),
        ExperienceLevel(key="VETERAN", display_name="Veteran", base_hit_points=4, retreat_chance=0.5),
    ]
    gd.default_experience_level = gd.experience_levels[1]
    for prototype in (
        UnitPrototype(name="Warrior", shield_cost=10, attack=1, defense=1, categories=frozenset({"Land"})),
        UnitPrototype(name="Horseman", shield_cost=20, attack=2, defense=1, movement=2, categories=frozenset({"Land"})),
        UnitPrototype(name="Galley", shield_cost=30, attack=1, defense=1, movement=3, categories=frozenset({"Sea"})),
    ):
        gd.add_unit_prototype(prototype)
    gd.map_units = [
        MapUnit(
            id="unit-1",
            unit_type=gd.unit_prototypes["Warrior"],
            experience_level=gd.experience_levels[0],
            location=gd.map.tile_at(1, 1),
            hit_points_remaining=2,
            movement_points_remaining=1.0,
        ),
        MapUnit(
            id="unit-2",
            unit_type=gd.unit_prototypes["Galley"],
            experience_level=gd.experience_levels[2],
        ),
    ]
    gd.barbarian_info = BarbarianInfo(
        basic_barbarian=gd.unit_prototypes["Warrior"],
        advanced_barbarian=gd.unit_prototypes["Horseman"],
        barbarian_sea_unit=gd.unit_prototypes["Galley"],
    )
    return gd


def neighbor_coordinates(tile: Tile):
    return {d: (n.x, n.y) for d, n in tile.neighbors.items()}


@pytest.fixture
def game_data() -> GameData:
    return build_game_data()


@pytest.fixture
def snapshot(game_data: GameData) -> SaveFormat:
    return SaveFormat(game_data=game_data)


