from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_repository import IAccountRepository
from src.domain.base import utcnow
from src.domain.entities import Account, normalize_email
from src.domain.errors import EmailAlreadyRegisteredError


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        stmt = select(Account).where(Account.email == normalize_email(email))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, account: Account) -> Account:
        """Create a new account, translating the unique violation on email"""
        account.email = normalize_email(account.email)
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise EmailAlreadyRegisteredError(account.email) from exc
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        if (account.reset_token_hash is None) != (account.reset_token_expires_at is None):
            raise ValueError("reset_token_hash and reset_token_expires_at must be set together")
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def get_by_active_reset_token(
        self, token_hash: str, now: datetime
    ) -> Optional[Account]:
        """Get account whose reset token hash matches and has not expired"""
        stmt = select(Account).where(
            Account.reset_token_hash == token_hash,
            Account.reset_token_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def replace_password_with_reset_token(
        self, account: Account, token_hash: str, password_hash: str, now: datetime
    ) -> bool:
        """Conditional update: only one caller can consume a given token"""
        stmt = (
            update(Account)
            .where(
                Account.id == account.id,
                Account.reset_token_hash == token_hash,
                Account.reset_token_expires_at > now,
            )
            .values(
                password_hash=password_hash,
                reset_token_hash=None,
                reset_token_expires_at=None,
                updated_at=utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.exec(stmt)
        if result.rowcount != 1:
            return False
        await self.session.refresh(account)
        return True
