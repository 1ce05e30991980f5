"""
Signin Use Case

Verifies credentials and issues a session token.
"""

import asyncio
import logging

from src.libs.result import Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_token_codec import SessionTokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import normalize_email
from . import messages
from .dtos import AccountInfo, AuthResult, CredentialsCommand

logger = logging.getLogger(__name__)


class SigninUseCase:
    """
    Use case for signin.

    Business Rules:
    - Unknown email and wrong password return the same error
    - An unknown email still costs one bcrypt verification
    """

    def __init__(
        self, uow: UnitOfWork, hasher: PasswordHasher, token_codec: SessionTokenCodec
    ):
        self.uow = uow
        self.hasher = hasher
        self.token_codec = token_codec

    async def execute(self, command: CredentialsCommand) -> Result[AuthResult]:
        email = normalize_email(command.email or "")
        if not email or not command.password:
            return Return.err(messages.CREDENTIALS_REQUIRED)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)

            if account is None:
                await asyncio.to_thread(self.hasher.verify_dummy, command.password)
                return Return.err(messages.INVALID_CREDENTIALS)

            verified = await asyncio.to_thread(
                self.hasher.verify, command.password, account.password_hash
            )
            if not verified:
                return Return.err(messages.INVALID_CREDENTIALS)

            logger.info("Account %s signed in", account.id)

            return Return.ok(
                AuthResult(
                    message=messages.SIGNIN_SUCCESS,
                    user=AccountInfo(id=str(account.id), email=account.email),
                    session_token=self.token_codec.issue(account.id),
                )
            )
