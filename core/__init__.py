"""
Core package for the venue ordering system
Contains the application state owner and orchestration
"""

from .order_system import VenueOrderSystem

__all__ = [
    'VenueOrderSystem'
]
