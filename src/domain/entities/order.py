"""
Order Entity

Orders shown on the dashboard. Plain records, no business rules.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    number: int
    customer: str = Field(max_length=255)
    product: str = Field(max_length=255)
    account_id: UUID = Field(foreign_key="accounts.id", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_orders_created_at", "created_at"),)
