"""
In-memory cart store
"""
import uuid
from typing import Dict, Optional, Tuple

from models.cart import CartLine
from models.errors import InvalidQuantityError
from models.menu import MenuItem, Amount
from log_config import get_logger

log = get_logger(__name__)


def is_positive_int(value) -> bool:
    # bool is an int subclass but never a valid quantity
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class CartStore:
    # In-memory cart lines, kept in insertion order

    def __init__(self):
        self._lines: Dict[str, CartLine] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def get_line(self, line_id: str) -> Optional[CartLine]:
        return self._lines.get(line_id)

    def find_line_for_item(self, item_id: str) -> Optional[CartLine]:
        for line in self._lines.values():
            if line.menu_item.item_id == item_id:
                return line
        return None

    def is_empty(self) -> bool:
        return not self._lines

    def add_item(self, menu_item: MenuItem, quantity: int = 1) -> CartLine:
        """Add quantity of an item, merging into the existing line for that item."""
        if not is_positive_int(quantity):
            raise InvalidQuantityError(f"Quantity must be a positive integer, got {quantity!r}")

        line = self.find_line_for_item(menu_item.item_id)
        if line:
            line.quantity += quantity
            log.debug("Incremented line {} ({}) to {}", line.line_id, menu_item.item_id, line.quantity)
            return line

        line = CartLine(line_id=str(uuid.uuid4()), menu_item=menu_item, quantity=quantity)
        self._lines[line.line_id] = line
        log.debug("Created line {} for {} x{}", line.line_id, menu_item.item_id, quantity)
        return line

    def set_quantity(self, line_id: str, quantity: int) -> bool:
        """Set the absolute quantity of a line; zero or less removes it.

        Returns False when the line does not exist.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityError(f"Quantity must be an integer, got {quantity!r}")
        if quantity <= 0:
            return self.remove_line(line_id)

        line = self._lines.get(line_id)
        if line is None:
            return False
        line.quantity = quantity
        return True

    def remove_line(self, line_id: str) -> bool:
        return self._lines.pop(line_id, None) is not None

    def total(self) -> Amount:
        return sum(line.line_total for line in self._lines.values())

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def line_count(self) -> int:
        return len(self._lines)

    def clear(self) -> int:
        # only called by checkout, after the order exists
        removed = len(self._lines)
        self._lines.clear()
        return removed
