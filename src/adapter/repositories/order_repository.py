from typing import List
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.order_repository import IOrderRepository
from src.domain.entities import Order


class OrderRepository(IOrderRepository):
    """Order repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_recent(self) -> List[Order]:
        """All orders, newest first"""
        stmt = select(Order).order_by(Order.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, order: Order) -> Order:
        """Create a new order"""
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def count_by_account_id(self, account_id: UUID) -> int:
        """Number of orders owned by an account"""
        stmt = select(func.count()).select_from(Order).where(Order.account_id == account_id)
        result = await self.session.exec(stmt)
        return result.one()
