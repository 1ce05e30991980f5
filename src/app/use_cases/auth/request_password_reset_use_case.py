"""
Request Password Reset Use Case

Issues a one-time reset token for an account. Email delivery is not
implemented; in dev mode the raw token is echoed back in the response.
"""

import logging
from typing import AsyncContextManager, Callable, Optional

from src.libs.result import Result, Return
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import normalize_email
from . import messages
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: unknown emails get the generic message
    - Outside dev mode the store is only touched by the deferred job, so the
      response never depends on whether the account exists
    - A new request overwrites any pending reset token
    - dev_mode echoes the raw token. Development only, unsafe in production
    """

    def __init__(
        self,
        uow_factory: Callable[[], AsyncContextManager[UnitOfWork]],
        reset_tokens: ResetTokenManager,
        defer: Callable[..., None],
        dev_mode: bool = False,
    ):
        """
        Args:
            uow_factory: Opens an entered Unit of Work per call
            reset_tokens: Reset token manager
            defer: Schedules a coroutine function with its arguments to run
                after the response is sent (BackgroundTasks.add_task)
            dev_mode: Echo the raw token in the response
        """
        self.uow_factory = uow_factory
        self.reset_tokens = reset_tokens
        self.defer = defer
        self.dev_mode = dev_mode

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Account email address (not yet normalized)

        Returns:
            Result with the response message (and raw token in dev mode),
            or Error(VALIDATION_ERROR) when email is empty
        """
        normalized_email = normalize_email(email or "")
        if not normalized_email:
            return Return.err(messages.EMAIL_REQUIRED)

        generic = RequestPasswordResetResponse(message=messages.RESET_REQUEST_GENERIC)

        if not self.dev_mode:
            # Raw token must reach the user out of band (email), never this channel
            self.defer(self.issue_token, normalized_email)
            return Return.ok(generic)

        raw_token = await self.issue_token(normalized_email)
        if raw_token is None:
            return Return.ok(generic)

        logger.warning("Dev mode: returning reset token in response")
        return Return.ok(
            RequestPasswordResetResponse(message=messages.RESET_REQUEST_DEV, reset_token=raw_token)
        )

    async def issue_token(self, email: str) -> Optional[str]:
        """
        Store a fresh reset token for the account with this normalized email.

        Returns:
            The raw token, or None when no such account exists
        """
        async with self.uow_factory() as uow:
            account = await uow.accounts.get_by_email(email)
            if account is None:
                return None

            raw_token = await self.reset_tokens.issue(uow.accounts, account)
            account_id = account.id
            await uow.commit()

        logger.info("Password reset requested for account %s", account_id)
        return raw_token
