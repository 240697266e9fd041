"""
Main VenueOrderSystem class - owns the stores and orchestrates all services
"""
from typing import Callable, Dict, List, Any, Optional

from config import AppConfig
from models.order import ALL_STATUSES, PaymentStatus
from services.menu_catalog import MenuCatalog
from services.cart_service import CartService
from services.order_service import OrderService
from services.payment_service import PaymentService
from services.checkout_service import CheckoutService
from stores.cart_store import CartStore
from stores.order_store import OrderStore
from log_config import get_logger

log = get_logger(__name__)

Listener = Callable[[str, Dict[str, Any]], None]


class VenueOrderSystem:
    # Central coordinator for the venue: owns both stores and every service
    #
    # One instance per running application. Views receive it explicitly and
    # are told about every mutation through subscribe().

    def __init__(self, config: Optional[AppConfig] = None, catalog: Optional[MenuCatalog] = None):
        self.config = config or AppConfig()
        self.catalog = catalog or MenuCatalog()

        # stores: the only owners of cart and order state
        self.cart_store = CartStore()
        self.order_store = OrderStore(self.config.table_number_min, self.config.table_number_max)

        # services
        self.payment_service = PaymentService(
            merchant_id=self.config.merchant_id,
            merchant_name=self.config.merchant_name,
            note=self.config.payment_note,
            url_template=self.config.payment_qr_url_template
        )
        self.cart_service = CartService(self.cart_store, self.catalog)
        self.order_service = OrderService(self.order_store, self.payment_service)
        self.checkout_service = CheckoutService(self.cart_store, self.order_store)

        self._listeners: List[Listener] = []

    # === change notification ===
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called as listener(event, snapshot) after every mutation.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: str, result: Dict[str, Any]) -> Dict[str, Any]:
        if self._listeners:
            snapshot = self.snapshot()
            for listener in list(self._listeners):
                try:
                    listener(event, snapshot)
                except Exception:
                    # a broken view must not undo or hide a completed mutation
                    log.exception("Listener failed while handling {}", event)
        return result

    def snapshot(self) -> Dict[str, Any]:
        return {
            "cart": self.cart_service.get_cart_details(),
            "orders": self.order_service.list_orders()["orders"],
            "counts": self.order_service.get_status_counts()
        }

    # === menu ===
    def get_menu(self, category=None) -> Dict[str, Any]:
        try:
            items = self.catalog.list_items(category)
        except ValueError as e:
            return {"success": False, "error": str(e), "error_code": "INVALID_CATEGORY"}
        return {
            "success": True,
            "categories": [c.value for c in self.catalog.categories()],
            "items": [item.to_dict() for item in items]
        }

    def find_menu_items(self, query: str, category=None, limit: int = 5) -> Dict[str, Any]:
        return self.catalog.find_items(query, category, limit)

    # === cart ===
    def get_cart_details(self) -> Dict[str, Any]:
        return self.cart_service.get_cart_details()

    def add_to_cart(self, item_id: str, quantity=1) -> Dict[str, Any]:
        return self._notify("cart.add", self.cart_service.add_to_cart(item_id, quantity))

    def update_cart_quantity(self, line_id: str, quantity) -> Dict[str, Any]:
        return self._notify("cart.update", self.cart_service.update_quantity(line_id, quantity))

    def edit_cart_quantity(self, line_id: str, text) -> Dict[str, Any]:
        return self._notify("cart.update", self.cart_service.edit_quantity(line_id, text))

    def remove_cart_line(self, line_id: str) -> Dict[str, Any]:
        return self._notify("cart.remove", self.cart_service.remove_line(line_id))

    # === orders ===
    def checkout(self, notes: str = "", payment_status=PaymentStatus.UNPAID,
                 table_number: int = None) -> Dict[str, Any]:
        return self._notify("checkout", self.checkout_service.checkout(notes, payment_status, table_number))

    def list_orders(self, status=ALL_STATUSES) -> Dict[str, Any]:
        return self.order_service.list_orders(status)

    def get_status_counts(self) -> Dict[str, int]:
        return self.order_service.get_status_counts()

    def get_order_details(self, order_id: str) -> Dict[str, Any]:
        return self.order_service.get_order_details(order_id)

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        return self._notify("order.cancel", self.order_service.cancel_order(order_id))

    def update_order_status(self, order_id: str, status) -> Dict[str, Any]:
        return self._notify("order.status", self.order_service.update_status(order_id, status))

    def update_payment_status(self, order_id: str, payment_status) -> Dict[str, Any]:
        return self._notify("order.payment", self.order_service.update_payment_status(order_id, payment_status))

    def get_payment_qr(self, order_id: str) -> Dict[str, Any]:
        return self.order_service.get_payment_qr(order_id)
