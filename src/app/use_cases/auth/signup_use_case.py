import asyncio
import logging

from src.libs.result import Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_token_codec import SessionTokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, normalize_email
from src.domain.errors import EmailAlreadyRegisteredError
from . import messages
from .dtos import AccountInfo, AuthResult, CredentialsCommand

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Business Logic:
    1. Require non-empty email and password
    2. Normalize email (trim, lower-case)
    3. Fast-path check for an existing account
    4. Hash password with bcrypt
    5. Create Account; the unique index on email decides concurrent races
    6. Commit and issue a session token
    """

    def __init__(
        self, uow: UnitOfWork, hasher: PasswordHasher, token_codec: SessionTokenCodec
    ):
        self.uow = uow
        self.hasher = hasher
        self.token_codec = token_codec

    async def execute(self, command: CredentialsCommand) -> Result[AuthResult]:
        """
        Execute signup use case

        Args:
            command: CredentialsCommand with raw email and password

        Returns:
            Result[AuthResult] with account info and session token,
            or Error(VALIDATION_ERROR / EMAIL_ALREADY_EXISTS)
        """
        email = normalize_email(command.email or "")
        if not email or not command.password:
            return Return.err(messages.CREDENTIALS_REQUIRED)

        async with self.uow:
            existing_account = await self.uow.accounts.get_by_email(email)
            if existing_account:
                return Return.err(messages.EMAIL_ALREADY_EXISTS)

            password_hash = await asyncio.to_thread(self.hasher.hash, command.password)
            account = Account(email=email, password_hash=password_hash)
            try:
                account = await self.uow.accounts.create(account)
            except EmailAlreadyRegisteredError:
                # Lost a race with a concurrent signup for the same email
                return Return.err(messages.EMAIL_ALREADY_EXISTS)

            await self.uow.commit()

            logger.info("Account %s signed up", account.id)

            return Return.ok(
                AuthResult(
                    message=messages.SIGNUP_SUCCESS,
                    user=AccountInfo(id=str(account.id), email=account.email),
                    session_token=self.token_codec.issue(account.id),
                )
            )
