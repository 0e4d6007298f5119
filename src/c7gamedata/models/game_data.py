from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .map import Map
from .resource import Resource
from .terrain import TerrainType
from .units import BarbarianInfo, ExperienceLevel, MapUnit, UnitPrototype


@dataclass(eq=False)
class GameData:
    """Root aggregate of the game state. Owns every entity it references."""

    terrain_types: List[TerrainType] = field(default_factory=list)
    resources: List[Resource] = field(default_factory=list)
    map: Map = field(default_factory=Map)
    experience_levels: List[ExperienceLevel] = field(default_factory=list)
    default_experience_level: Optional[ExperienceLevel] = None
    unit_prototypes: Dict[str, UnitPrototype] = field(default_factory=dict)
    map_units: List[MapUnit] = field(default_factory=list)
    barbarian_info: Optional[BarbarianInfo] = None
    turn: int = 0

    def add_unit_prototype(self, prototype: UnitPrototype) -> None:
        if prototype.key in self.unit_prototypes:
            raise ValueError(f"Duplicate unit prototype: {prototype.key}")
        self.unit_prototypes[prototype.key] = prototype

    def to_dict(self) -> Dict[str, Any]:
        default_level = self.default_experience_level
        return {
            "turn": self.turn,
            "terrain_types": [t.to_dict() for t in self.terrain_types],
            "resources": [r.to_dict() for r in self.resources],
            "map": self.map.to_dict(),
            "experience_levels": [e.to_dict() for e in self.experience_levels],
            "default_experience_level_key": default_level.key if default_level is not None else None,
            # Persisted as a list so prototype names never pass through field-name casing
            "unit_prototypes": [p.to_dict() for p in self.unit_prototypes.values()],
            "map_units": [u.to_dict() for u in self.map_units],
            "barbarian_info": self.barbarian_info.to_dict() if self.barbarian_info is not None else None,
        }
