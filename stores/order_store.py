"""
In-memory order store
"""
import itertools
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from models.cart import CartLine
from models.errors import (
    EmptyCartError, InvalidTableNumberError, InvalidTransitionError, InvalidPaymentStatusError,
    InvalidStatusError, InvalidNotesError
)
from models.order import Order, OrderLine, OrderStatus, PaymentStatus, ALL_STATUSES
from log_config import get_logger

log = get_logger(__name__)

StatusFilter = Union[OrderStatus, str]


def parse_status_filter(status: StatusFilter) -> Optional[OrderStatus]:
    """Resolve a status filter; None means every status."""
    if isinstance(status, OrderStatus):
        return status
    if status == ALL_STATUSES:
        return None
    try:
        return OrderStatus(status)
    except ValueError:
        raise InvalidStatusError(f"Unknown order status: {status!r}")


def parse_payment_status(payment_status) -> PaymentStatus:
    if isinstance(payment_status, PaymentStatus):
        return payment_status
    try:
        return PaymentStatus(payment_status)
    except ValueError:
        raise InvalidPaymentStatusError(f"Unknown payment status: {payment_status!r}")


class OrderView:
    """Read-only view over the store's orders with a given status.

    Nothing is copied: every iteration walks the live collection, so the view
    reflects later transitions and keeps the store's newest-first ordering.
    """

    def __init__(self, orders: List[Order], status: Optional[OrderStatus]):
        self._orders = orders
        self.status = status

    def __iter__(self) -> Iterator[Order]:
        for order in self._orders:
            if self.status is None or order.status is self.status:
                yield order

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def to_list(self) -> List[Order]:
        return list(self)


class OrderStore:
    # Placed orders, most recent first

    def __init__(self, table_number_min: int = 1, table_number_max: int = 50):
        self.table_number_min = table_number_min
        self.table_number_max = table_number_max
        self._orders: List[Order] = []
        self._sequence = itertools.count(1)

    def __len__(self) -> int:
        return len(self._orders)

    def orders(self) -> Tuple[Order, ...]:
        return tuple(self._orders)

    def get_order(self, order_id: str) -> Optional[Order]:
        index = self._index_of(order_id)
        return self._orders[index] if index is not None else None

    def _index_of(self, order_id: str) -> Optional[int]:
        for index, order in enumerate(self._orders):
            if order.order_id == order_id:
                return index
        return None

    def _validate_table_number(self, table_number) -> None:
        if isinstance(table_number, bool) or not isinstance(table_number, int):
            raise InvalidTableNumberError(f"Table number must be an integer, got {table_number!r}")
        if not self.table_number_min <= table_number <= self.table_number_max:
            raise InvalidTableNumberError(
                f"Table number must be between {self.table_number_min} and {self.table_number_max}"
            )

    def create_order(self, lines: Iterable[CartLine], notes: str, table_number: int,
                     payment_status=PaymentStatus.UNPAID) -> Order:
        """Create an order from a snapshot of cart lines and prepend it."""
        snapshot = tuple(
            OrderLine(
                item_id=line.menu_item.item_id,
                name=line.menu_item.name,
                unit_price=line.menu_item.unit_price,
                quantity=line.quantity
            )
            for line in lines
        )
        if not snapshot:
            raise EmptyCartError("Cannot create an order without lines")
        self._validate_table_number(table_number)
        if notes is None:
            notes = ""
        if not isinstance(notes, str):
            raise InvalidNotesError(f"Notes must be text, got {type(notes).__name__}")
        payment_status = parse_payment_status(payment_status)

        order = Order(
            order_id=f"ORD_{next(self._sequence):06d}",
            lines=snapshot,
            notes=notes,
            table_number=table_number,
            total=sum(line.line_total for line in snapshot),
            created_at=datetime.now(timezone.utc),
            status=OrderStatus.PENDING,
            payment_status=payment_status
        )
        self._orders.insert(0, order)
        log.debug("Stored order {} (table {}, total {})", order.order_id, table_number, order.total)
        return order

    def cancel_order(self, order_id: str) -> bool:
        index = self._index_of(order_id)
        if index is None:
            return False
        del self._orders[index]
        return True

    def update_status(self, order_id: str, status) -> Order:
        """Move an order from pending to completed; every other move is rejected."""
        index = self._index_of(order_id)
        if index is None:
            raise InvalidTransitionError(f"Order {order_id} does not exist")
        target = parse_status_filter(status)
        if target is None:
            raise InvalidStatusError(f"Unknown order status: {status!r}")

        order = self._orders[index]
        if order.status is not OrderStatus.PENDING or target is not OrderStatus.COMPLETED:
            raise InvalidTransitionError(
                f"Cannot move order {order_id} from {order.status.value} to {target.value}"
            )
        order = replace(order, status=target)
        self._orders[index] = order
        return order

    def update_payment_status(self, order_id: str, payment_status) -> Optional[Order]:
        """Set the payment status in either direction; None when the order is absent."""
        payment_status = parse_payment_status(payment_status)
        index = self._index_of(order_id)
        if index is None:
            return None
        order = replace(self._orders[index], payment_status=payment_status)
        self._orders[index] = order
        return order

    def filter_by_status(self, status: StatusFilter = ALL_STATUSES) -> OrderView:
        return OrderView(self._orders, parse_status_filter(status))

    def counts_by_status(self) -> Dict[str, int]:
        counts = {status.value: 0 for status in OrderStatus}
        for order in self._orders:
            counts[order.status.value] += 1
        counts[ALL_STATUSES] = len(self._orders)
        return counts
