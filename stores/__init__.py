"""
Stores package for the venue ordering system
Holds the in-memory cart and order collections
"""

from .cart_store import CartStore
from .order_store import OrderStore, OrderView

__all__ = [
    'CartStore',
    'OrderStore', 'OrderView'
]
