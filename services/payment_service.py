"""
Payment QR data for an order

Only the data is produced here; rendering the QR image is left to whoever
loads the URL.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any
from urllib.parse import quote

from models.menu import Amount
from models.order import Order


def round_amount(amount: Amount) -> int:
    """Round to the nearest whole currency unit, halves rounding up."""
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PaymentQR:
    """Payment QR data model"""
    order_id: str
    amount: int
    note: str
    merchant_id: str
    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "order_id": self.order_id,
            "amount": self.amount,
            "note": self.note,
            "merchant_id": self.merchant_id,
            "image_url": self.image_url
        }


class PaymentService:
    # Builds transfer QR data for the configured merchant account

    def __init__(self, merchant_id: str, merchant_name: str, note: str, url_template: str):
        self.merchant_id = merchant_id
        self.merchant_name = merchant_name
        self.note = note
        self.url_template = url_template

    def build_qr_url(self, amount: int) -> str:
        return self.url_template.format(
            merchant_id=quote(self.merchant_id, safe=""),
            amount=amount,
            note=quote(self.note, safe=""),
            merchant_name=quote(self.merchant_name, safe="")
        )

    def build_payment_qr(self, order: Order) -> PaymentQR:
        amount = round_amount(order.total)
        return PaymentQR(
            order_id=order.order_id,
            amount=amount,
            note=self.note,
            merchant_id=self.merchant_id,
            image_url=self.build_qr_url(amount)
        )
