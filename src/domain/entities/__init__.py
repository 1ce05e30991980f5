"""
Domain Entities

Each entity in its own file.
"""

from .account import Account, normalize_email
from .order import Order

__all__ = [
    "Account",
    "Order",
    "normalize_email",
]
