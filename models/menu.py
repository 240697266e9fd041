"""
Menu related data models
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any, Union
from enum import Enum

Amount = Union[int, float]


class MenuCategory(Enum):
    FOOD = "food"
    DRINK = "drink"
    SERVICE = "service"


@dataclass(frozen=True)
class MenuItem:
    """Menu item data model"""
    item_id: str
    name: str
    unit_price: Amount
    category: MenuCategory
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "item_id": self.item_id,
            "name": self.name,
            "unit_price": self.unit_price,
            "category": self.category.value,
            "image": self.image
        }
