"""
Order related data models
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Dict, Any
from enum import Enum

from .menu import Amount

ALL_STATUSES = "all"


class OrderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class PaymentStatus(Enum):
    UNPAID = "unpaid"
    PAID = "paid"


@dataclass(frozen=True)
class OrderLine:
    """Order line data model - a snapshot taken from the cart at checkout"""
    item_id: str
    name: str
    unit_price: Amount
    quantity: int

    @property
    def line_total(self) -> Amount:
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "item_id": self.item_id,
            "name": self.name,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "line_total": self.line_total
        }


@dataclass(frozen=True)
class Order:
    """Order data model"""
    order_id: str
    lines: Tuple[OrderLine, ...]
    notes: str
    table_number: int
    total: Amount
    created_at: datetime
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "order_id": self.order_id,
            "lines": [line.to_dict() for line in self.lines],
            "notes": self.notes,
            "table_number": self.table_number,
            "total": self.total,
            "item_count": self.item_count,
            "created_at": self.created_at.isoformat(),
            "status": self.status.value,
            "payment_status": self.payment_status.value
        }
