"""
Confirm Password Reset Use Case

Sets a new password using a one-time reset token.
"""

import logging

from src.libs.result import Result, Return
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.unit_of_work import UnitOfWork
from . import messages
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Wrong, expired and already-used tokens give the same INVALID_TOKEN error
    - Password hash replaced and reset fields cleared in a single update
    - No session is issued; the user signs in again
    """

    def __init__(self, uow: UnitOfWork, reset_tokens: ResetTokenManager):
        self.uow = uow
        self.reset_tokens = reset_tokens

    async def execute(self, token: str, new_password: str) -> Result[MessageResponse]:
        if not token or not new_password:
            return Return.err(messages.RESET_FIELDS_REQUIRED)

        async with self.uow:
            account = await self.reset_tokens.consume(self.uow.accounts, token, new_password)
            if account is None:
                return Return.err(messages.INVALID_RESET_TOKEN)
            account_id = account.id
            await self.uow.commit()

        logger.info("Password reset completed for account %s", account_id)
        return Return.ok(MessageResponse(message=messages.RESET_SUCCESS))
