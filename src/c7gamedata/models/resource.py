from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict

NONE_KEY = "NONE"


class ResourceCategory(str, Enum):
    BONUS = "BONUS"
    LUXURY = "LUXURY"
    STRATEGIC = "STRATEGIC"
    NONE = "NONE"


@dataclass(frozen=True)
class Resource:
    """A map resource (Civ3 "good").

    ``index`` is the dense position in the imported resource list; the
    ``Resource.NONE`` sentinel sits outside that set at index -1.
    """

    key: str
    index: int
    name: str = ""
    icon: int = 0
    category: ResourceCategory = ResourceCategory.NONE
    food_bonus: int = 0
    shields_bonus: int = 0
    commerce_bonus: int = 0
    appearance_ratio: int = 0
    disappearance_ratio: int = 0
    civilopedia_entry: str = ""

    NONE: ClassVar["Resource"]

    @property
    def is_none(self) -> bool:
        return self.key == NONE_KEY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "index": self.index,
            "name": self.name,
            "icon": self.icon,
            "category": self.category.value,
            "food_bonus": self.food_bonus,
            "shields_bonus": self.shields_bonus,
            "commerce_bonus": self.commerce_bonus,
            "appearance_ratio": self.appearance_ratio,
            "disappearance_ratio": self.disappearance_ratio,
            "civilopedia_entry": self.civilopedia_entry,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Resource":
        return Resource(
            key=data["key"],
            index=int(data["index"]),
            name=data.get("name", ""),
            icon=int(data.get("icon", 0)),
            category=ResourceCategory(data.get("category", ResourceCategory.NONE.value)),
            food_bonus=int(data.get("food_bonus", 0)),
            shields_bonus=int(data.get("shields_bonus", 0)),
            commerce_bonus=int(data.get("commerce_bonus", 0)),
            appearance_ratio=int(data.get("appearance_ratio", 0)),
            disappearance_ratio=int(data.get("disappearance_ratio", 0)),
            civilopedia_entry=data.get("civilopedia_entry", ""),
        )


Resource.NONE = Resource(key=NONE_KEY, index=-1, name=NONE_KEY, category=ResourceCategory.NONE)
