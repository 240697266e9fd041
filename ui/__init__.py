"""
UI package for the venue ordering system
Contains user interface implementations
"""

from .simple_ui import SimpleOrderUI
from .formatting import format_currency

__all__ = [
    'SimpleOrderUI', 'format_currency'
]
