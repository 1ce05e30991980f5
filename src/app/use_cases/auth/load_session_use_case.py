from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from . import messages
from .dtos import AccountInfo, SessionResponse


class LoadSessionUseCase:
    """Resolve a verified session's account id to the account it names"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[SessionResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(messages.ACCOUNT_NOT_FOUND)

            return Return.ok(
                SessionResponse(user=AccountInfo(id=str(account.id), email=account.email))
            )
