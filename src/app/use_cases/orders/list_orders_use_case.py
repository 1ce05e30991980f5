from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import OrderInfo, OrderListResponse


class ListOrdersUseCase:
    """List all orders, newest first. Caller must be authenticated."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[OrderListResponse]:
        async with self.uow:
            orders = await self.uow.orders.list_recent()
            return Return.ok(
                OrderListResponse(
                    orders=[
                        OrderInfo(
                            id=str(order.id),
                            number=order.number,
                            customer=order.customer,
                            product=order.product,
                        )
                        for order in orders
                    ]
                )
            )
