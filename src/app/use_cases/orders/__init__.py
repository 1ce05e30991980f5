"""
Order Use Cases
"""

from .list_orders_use_case import ListOrdersUseCase
from .dtos import OrderInfo, OrderListResponse

__all__ = [
    "ListOrdersUseCase",
    "OrderInfo",
    "OrderListResponse",
]
