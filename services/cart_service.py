"""
Cart service - handles cart operations
"""
from typing import Dict, Any, Union

from models.cart import CartDetails, CartSummary
from models.errors import OrderingError, InvalidQuantityError
from stores.cart_store import CartStore
from log_config import get_logger
from .menu_catalog import MenuCatalog

log = get_logger(__name__)

QuantityInput = Union[int, str]


def parse_quantity(value: QuantityInput) -> int:
    """Parse a quantity typed by a user or sent by a client.

    Accepts ints and integer strings (surrounding whitespace ignored).
    """
    if isinstance(value, bool):
        raise InvalidQuantityError(f"Quantity must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
    raise InvalidQuantityError(f"Quantity must be a number, got {value!r}")


class CartService:
    # Business logic around the cart

    def __init__(self, cart_store: CartStore, catalog: MenuCatalog):
        self.cart_store = cart_store
        self.catalog = catalog

    def _failure(self, error: OrderingError) -> Dict[str, Any]:
        log.warning("Cart operation rejected: {}", error.message)
        return {
            "success": False,
            "error": error.message,
            "error_code": error.code
        }

    def add_to_cart(self, item_id: str, quantity: QuantityInput = 1) -> Dict[str, Any]:
        # Add a menu item to the cart (merges into an existing line)
        menu_item = self.catalog.get_item(item_id)
        if menu_item is None:
            log.warning("Menu item {} not found", item_id)
            return {
                "success": False,
                "error": "Menu item not found",
                "error_code": "NOT_FOUND"
            }

        try:
            line = self.cart_store.add_item(menu_item, parse_quantity(quantity))
        except OrderingError as e:
            return self._failure(e)

        log.info("Added {} x{} to cart (line quantity {})", item_id, quantity, line.quantity)
        return {
            "success": True,
            "line_id": line.line_id,
            "line": line.to_dict(),
            "message": f"{menu_item.name} added to cart."
        }

    def update_quantity(self, line_id: str, quantity: QuantityInput) -> Dict[str, Any]:
        # Stepper updates: zero or less removes the line
        try:
            new_quantity = parse_quantity(quantity)
        except OrderingError as e:
            return self._failure(e)

        changed = self.cart_store.set_quantity(line_id, new_quantity)
        if not changed:
            log.debug("Quantity update for unknown line {} ignored", line_id)
        return {
            "success": True,
            "changed": changed,
            "removed": changed and new_quantity <= 0,
            "quantity": max(new_quantity, 0) if changed else None
        }

    def edit_quantity(self, line_id: str, text: QuantityInput) -> Dict[str, Any]:
        """Apply a quantity typed into the cart's quantity field.

        Unlike update_quantity, typed values must be positive: an invalid edit
        is discarded and the line keeps its previous quantity.
        """
        try:
            new_quantity = parse_quantity(text)
            if new_quantity <= 0:
                raise InvalidQuantityError(f"Quantity must be positive, got {new_quantity}")
        except OrderingError as e:
            line = self.cart_store.get_line(line_id)
            result = self._failure(e)
            result["quantity"] = line.quantity if line else None
            return result

        return self.update_quantity(line_id, new_quantity)

    def remove_line(self, line_id: str) -> Dict[str, Any]:
        # Unknown line ids are a no-op
        removed = self.cart_store.remove_line(line_id)
        if removed:
            log.info("Removed cart line {}", line_id)
        return {
            "success": True,
            "changed": removed
        }

    def get_cart(self) -> CartDetails:
        lines = list(self.cart_store.lines())
        summary = CartSummary(
            total_lines=len(lines),
            item_count=self.cart_store.item_count(),
            total_amount=self.cart_store.total()
        )
        return CartDetails(lines=lines, summary=summary)

    def get_cart_details(self) -> Dict[str, Any]:
        # Current cart lines with totals
        details = self.get_cart().to_dict()
        count = details["summary"]["total_lines"]
        details["success"] = True
        details["message"] = f"{count} line(s) in the cart." if count else "The cart is empty."
        return details
