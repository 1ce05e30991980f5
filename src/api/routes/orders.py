from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.orders import ListOrdersUseCase, OrderListResponse
from src.depends import get_current_account_id, get_unit_of_work

router = APIRouter(tags=["Orders"])


@router.get("/orders", status_code=status.HTTP_200_OK, response_model=OrderListResponse)
async def list_orders(
    account_id: UUID = Depends(get_current_account_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Orders

    Returns all orders, newest first.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired session cookie
        - 500 Internal Server Error: Server error
    """
    use_case = ListOrdersUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
