from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

from .map import Tile


@dataclass(frozen=True)
class ExperienceLevel:
    key: str
    display_name: str = ""
    base_hit_points: int = 3
    retreat_chance: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "display_name": self.display_name,
            "base_hit_points": self.base_hit_points,
            "retreat_chance": self.retreat_chance,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ExperienceLevel":
        return ExperienceLevel(
            key=data["key"],
            display_name=data.get("display_name", ""),
            base_hit_points=int(data.get("base_hit_points", 3)),
            retreat_chance=float(data.get("retreat_chance", 0.0)),
        )


@dataclass(frozen=True)
class UnitPrototype:
    """A buildable unit type. ``name`` doubles as its key."""

    name: str
    shield_cost: int = 0
    population_cost: int = 0
    attack: int = 0
    defense: int = 0
    bombard: int = 0
    movement: int = 1
    categories: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def key(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "shield_cost": self.shield_cost,
            "population_cost": self.population_cost,
            "attack": self.attack,
            "defense": self.defense,
            "bombard": self.bombard,
            "movement": self.movement,
            "categories": sorted(self.categories),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "UnitPrototype":
        return UnitPrototype(
            name=data["name"],
            shield_cost=int(data.get("shield_cost", 0)),
            population_cost=int(data.get("population_cost", 0)),
            attack=int(data.get("attack", 0)),
            defense=int(data.get("defense", 0)),
            bombard=int(data.get("bombard", 0)),
            movement=int(data.get("movement", 1)),
            categories=frozenset(data.get("categories", [])),
        )


@dataclass(eq=False)
class MapUnit:
    id: str
    unit_type: UnitPrototype
    experience_level: ExperienceLevel
    location: Optional[Tile] = None
    hit_points_remaining: int = 3
    movement_points_remaining: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "unit_type_key": self.unit_type.key,
            "experience_level_key": self.experience_level.key,
            "location_x": self.location.x if self.location is not None else None,
            "location_y": self.location.y if self.location is not None else None,
            "hit_points_remaining": self.hit_points_remaining,
            "movement_points_remaining": self.movement_points_remaining,
        }


@dataclass
class BarbarianInfo:
    basic_barbarian: UnitPrototype
    advanced_barbarian: UnitPrototype
    barbarian_sea_unit: UnitPrototype

    def to_dict(self) -> Dict[str, Any]:
        return {
            "basic_barbarian_key": self.basic_barbarian.key,
            "advanced_barbarian_key": self.advanced_barbarian.key,
            "barbarian_sea_unit_key": self.barbarian_sea_unit.key,
        }
