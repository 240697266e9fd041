"""
Order service - order listing and status/payment transitions
"""
from typing import Dict, Any

from models.errors import OrderingError
from models.order import ALL_STATUSES
from stores.order_store import OrderStore
from log_config import get_logger
from .payment_service import PaymentService

log = get_logger(__name__)


class OrderService:
    # Business logic around placed orders

    def __init__(self, order_store: OrderStore, payment_service: PaymentService):
        self.order_store = order_store
        self.payment_service = payment_service

    def _failure(self, error: OrderingError) -> Dict[str, Any]:
        log.warning("Order operation rejected: {}", error.message)
        return {
            "success": False,
            "error": error.message,
            "error_code": error.code
        }

    def _not_found(self, order_id: str) -> Dict[str, Any]:
        return {
            "success": False,
            "error": f"Order {order_id} not found",
            "error_code": "NOT_FOUND"
        }

    def list_orders(self, status=ALL_STATUSES) -> Dict[str, Any]:
        # Orders for one status, newest first
        try:
            view = self.order_store.filter_by_status(status)
        except OrderingError as e:
            return self._failure(e)

        orders = [order.to_dict() for order in view]
        return {
            "success": True,
            "status": status if isinstance(status, str) else status.value,
            "orders": orders,
            "total_found": len(orders)
        }

    def get_status_counts(self) -> Dict[str, int]:
        return self.order_store.counts_by_status()

    def get_order_details(self, order_id: str) -> Dict[str, Any]:
        # Details of a single order
        order = self.order_store.get_order(order_id)
        if order is None:
            return self._not_found(order_id)
        return {
            "success": True,
            "order": order.to_dict()
        }

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        # cancellation deletes the order; unknown ids change nothing
        removed = self.order_store.cancel_order(order_id)
        if removed:
            log.info("Cancelled order {}", order_id)
        return {
            "success": True,
            "changed": removed
        }

    def update_status(self, order_id: str, status) -> Dict[str, Any]:
        try:
            order = self.order_store.update_status(order_id, status)
        except OrderingError as e:
            return self._failure(e)

        log.info("Order {} is now {}", order_id, order.status.value)
        return {
            "success": True,
            "order": order.to_dict()
        }

    def update_payment_status(self, order_id: str, payment_status) -> Dict[str, Any]:
        try:
            order = self.order_store.update_payment_status(order_id, payment_status)
        except OrderingError as e:
            return self._failure(e)

        if order is None:
            log.debug("Payment update for unknown order {} ignored", order_id)
            return {
                "success": True,
                "changed": False
            }

        log.info("Order {} marked {}", order_id, order.payment_status.value)
        return {
            "success": True,
            "changed": True,
            "order": order.to_dict()
        }

    def get_payment_qr(self, order_id: str) -> Dict[str, Any]:
        order = self.order_store.get_order(order_id)
        if order is None:
            return self._not_found(order_id)
        return {
            "success": True,
            "payment_qr": self.payment_service.build_payment_qr(order).to_dict()
        }
