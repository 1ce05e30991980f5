import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.password_hasher import PasswordHasher


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock()
    uow.accounts.get_by_id = AsyncMock()
    uow.accounts.create = AsyncMock()
    uow.accounts.update = AsyncMock()
    uow.accounts.get_by_active_reset_token = AsyncMock()
    uow.accounts.replace_password_with_reset_token = AsyncMock()

    uow.orders = MagicMock()
    uow.orders.list_recent = AsyncMock()
    return uow


@pytest.fixture(scope="session")
def hasher():
    """Lowest accepted cost factor keeps the suite fast"""
    return PasswordHasher(rounds=10)
