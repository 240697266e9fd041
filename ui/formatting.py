"""
Display helpers shared by the user interfaces
"""
from decimal import Decimal, ROUND_HALF_UP

from models.menu import Amount


def format_currency(amount: Amount, currency: str = "VND") -> str:
    # VND has no minor unit and groups thousands with dots
    currency = currency.upper()
    if currency == "VND":
        whole = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        return f"{whole:,}".replace(",", ".") + " ₫"
    if currency == "USD":
        cents = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"${cents:,}"
    return f"{amount:,} {currency}"
