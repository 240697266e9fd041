"""
Checkout service - turns the cart into an order
"""
from typing import Dict, Any

from models.errors import OrderingError, EmptyCartError
from models.order import PaymentStatus
from stores.cart_store import CartStore
from stores.order_store import OrderStore
from log_config import get_logger

log = get_logger(__name__)


class CheckoutService:
    """Coordinates the cart and order stores at checkout.

    The order is created from a snapshot of the cart first; the cart is
    cleared only once the order exists, so a rejected checkout leaves both
    stores exactly as they were.
    """

    def __init__(self, cart_store: CartStore, order_store: OrderStore):
        self.cart_store = cart_store
        self.order_store = order_store

    def checkout(self, notes: str = "", payment_status=PaymentStatus.UNPAID,
                 table_number: int = None) -> Dict[str, Any]:
        try:
            if self.cart_store.is_empty():
                raise EmptyCartError("The cart is empty.")
            order = self.order_store.create_order(
                self.cart_store.lines(), notes, table_number, payment_status
            )
        except OrderingError as e:
            log.warning("Checkout rejected: {}", e.message)
            return {
                "success": False,
                "error": e.message,
                "error_code": e.code
            }

        self.cart_store.clear()
        log.info("Order {} placed for table {} ({} items, {}, total {})", order.order_id,
                 order.table_number, order.item_count, order.payment_status.value, order.total)
        return {
            "success": True,
            "order_id": order.order_id,
            "total": order.total,
            "order": order.to_dict(),
            "message": f"Order {order.order_id} placed for table {order.table_number}."
        }
