from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from ..civ3.records import TerrRecord


@dataclass(frozen=True)
class TerrainType:
    """A terrain type. Tiles reference one base and one overlay terrain type."""

    key: str
    display_name: str = ""
    civ3_index: int = -1
    base_food_production: int = 0
    base_shield_production: int = 0
    base_commerce_production: int = 0
    movement_cost: int = 1
    allows_cities: bool = True

    @staticmethod
    def import_from_civ3(civ3_index: int, terr: "TerrRecord") -> "TerrainType":
        return TerrainType(
            key=terr.name,
            display_name=terr.name,
            civ3_index=civ3_index,
            base_food_production=terr.food,
            base_shield_production=terr.shields,
            base_commerce_production=terr.commerce,
            movement_cost=terr.movement_cost,
            allows_cities=terr.allow_cities,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "display_name": self.display_name,
            "civ3_index": self.civ3_index,
            "base_food_production": self.base_food_production,
            "base_shield_production": self.base_shield_production,
            "base_commerce_production": self.base_commerce_production,
            "movement_cost": self.movement_cost,
            "allows_cities": self.allows_cities,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "TerrainType":
        return TerrainType(
            key=data["key"],
            display_name=data.get("display_name", ""),
            civ3_index=int(data.get("civ3_index", -1)),
            base_food_production=int(data.get("base_food_production", 0)),
            base_shield_production=int(data.get("base_shield_production", 0)),
            base_commerce_production=int(data.get("base_commerce_production", 0)),
            movement_cost=int(data.get("movement_cost", 1)),
            allows_cities=bool(data.get("allows_cities", True)),
        )
