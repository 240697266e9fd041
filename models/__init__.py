"""
Models package for the venue ordering system
Contains data models and error types
"""

from .menu import MenuItem, MenuCategory
from .cart import CartLine, CartSummary, CartDetails
from .order import Order, OrderLine, OrderStatus, PaymentStatus, ALL_STATUSES
from .errors import (
    OrderingError, EmptyCartError, NotFoundError, InvalidQuantityError,
    InvalidTransitionError, InvalidTableNumberError, InvalidPaymentStatusError,
    InvalidStatusError, InvalidNotesError
)

__all__ = [
    'MenuItem', 'MenuCategory',
    'CartLine', 'CartSummary', 'CartDetails',
    'Order', 'OrderLine', 'OrderStatus', 'PaymentStatus', 'ALL_STATUSES',
    'OrderingError', 'EmptyCartError', 'NotFoundError', 'InvalidQuantityError',
    'InvalidTransitionError', 'InvalidTableNumberError', 'InvalidPaymentStatusError',
    'InvalidStatusError', 'InvalidNotesError'
]
