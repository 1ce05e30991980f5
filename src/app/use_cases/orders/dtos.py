from typing import List
from pydantic import BaseModel


class OrderInfo(BaseModel):
    """Order fields shown on the dashboard"""

    id: str
    number: int
    customer: str
    product: str


class OrderListResponse(BaseModel):
    """Response for order listing"""

    orders: List[OrderInfo]
