"""
Cart related data models
"""
from dataclasses import dataclass
from typing import List, Dict, Any

from .menu import MenuItem, Amount


@dataclass
class CartLine:
    """Cart line data model - refers to the catalog item, never copies it"""
    line_id: str
    menu_item: MenuItem
    quantity: int

    @property
    def line_total(self) -> Amount:
        return self.menu_item.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "line_id": self.line_id,
            "item_id": self.menu_item.item_id,
            "name": self.menu_item.name,
            "unit_price": self.menu_item.unit_price,
            "category": self.menu_item.category.value,
            "quantity": self.quantity,
            "line_total": self.line_total
        }


@dataclass
class CartSummary:
    """Cart summary data model"""
    total_lines: int
    item_count: int
    total_amount: Amount

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "total_lines": self.total_lines,
            "item_count": self.item_count,
            "total_amount": self.total_amount
        }


@dataclass
class CartDetails:
    """Complete cart details"""
    lines: List[CartLine]
    summary: CartSummary

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "cart_items": [line.to_dict() for line in self.lines],
            "summary": self.summary.to_dict()
        }
