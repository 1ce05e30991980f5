from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Order


class IOrderRepository(ABC):
    """Order repository interface - application layer"""

    @abstractmethod
    async def list_recent(self) -> List[Order]:
        """All orders, newest first"""
        pass

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Create a new order"""
        pass

    @abstractmethod
    async def count_by_account_id(self, account_id) -> int:
        """Number of orders owned by an account"""
        pass
