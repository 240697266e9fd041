"""
Services package for the venue ordering system
Contains business logic services
"""

from .menu_catalog import MenuCatalog
from .cart_service import CartService
from .order_service import OrderService
from .payment_service import PaymentService, PaymentQR
from .checkout_service import CheckoutService

__all__ = [
    'MenuCatalog', 'CartService', 'OrderService',
    'PaymentService', 'PaymentQR', 'CheckoutService'
]
