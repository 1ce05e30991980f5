from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """
        Create a new account

        Raises:
            EmailAlreadyRegisteredError: if the email unique constraint fires
        """
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass

    @abstractmethod
    async def get_by_active_reset_token(
        self, token_hash: str, now: datetime
    ) -> Optional[Account]:
        """Get account whose reset token hash matches and has not expired"""
        pass

    @abstractmethod
    async def replace_password_with_reset_token(
        self, account: Account, token_hash: str, password_hash: str, now: datetime
    ) -> bool:
        """
        Set a new password hash and clear both reset fields in one update,
        only while the reset token still matches and is unexpired.

        Returns:
            True if exactly this caller consumed the token
        """
        pass
