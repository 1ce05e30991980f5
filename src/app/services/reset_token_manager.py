"""
Reset Token Manager

One-time password reset tokens. Only a SHA-256 digest of the raw token is
stored on the account; the raw value is handed to the caller once.
"""

import asyncio
import hashlib
import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from src.app.repositories.account_repository import IAccountRepository
from src.app.services.password_hasher import PasswordHasher
from src.domain.base import utcnow
from src.domain.entities import Account

logger = logging.getLogger(__name__)

DEFAULT_RESET_TOKEN_TTL = timedelta(minutes=30)
TOKEN_BYTES = 32  # 256 bits


def digest_token(raw_token: str) -> str:
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


class ResetTokenManager:
    def __init__(
        self,
        hasher: PasswordHasher,
        ttl: timedelta = DEFAULT_RESET_TOKEN_TTL,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.hasher = hasher
        self.ttl = ttl
        self._clock = clock

    async def issue(self, accounts: IAccountRepository, account: Account) -> str:
        """
        Generate a reset token for the account, replacing any pending one.

        Returns:
            The raw token. It is not stored anywhere.
        """
        if account.has_pending_reset:
            logger.info("Replacing pending reset token for account %s", account.id)

        raw_token = secrets.token_hex(TOKEN_BYTES)
        account.set_reset_token(digest_token(raw_token), self._clock() + self.ttl)
        await accounts.update(account)
        return raw_token

    async def consume(
        self, accounts: IAccountRepository, raw_token: str, new_password: str
    ) -> Optional[Account]:
        """
        Use a reset token to set a new password.

        Returns:
            The updated account, or None if the token is wrong, expired or
            already used. Callers cannot tell these cases apart.
        """
        token_hash = digest_token(raw_token)
        now = self._clock()

        account = await accounts.get_by_active_reset_token(token_hash, now)
        if account is None:
            return None

        password_hash = await asyncio.to_thread(self.hasher.hash, new_password)
        consumed = await accounts.replace_password_with_reset_token(
            account, token_hash, password_hash, now
        )
        if not consumed:
            logger.info("Reset token for account %s was consumed concurrently", account.id)
            return None
        return account
