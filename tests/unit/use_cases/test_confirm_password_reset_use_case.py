from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.auth import ConfirmPasswordResetUseCase
from src.domain.entities import Account


@pytest.fixture
def reset_tokens():
    manager = MagicMock()
    manager.consume = AsyncMock()
    return manager


@pytest.mark.asyncio
async def test_successful_reset(mock_uow, reset_tokens):
    account = Account(id=uuid4(), email="a@x.com", password_hash="new-hash")
    reset_tokens.consume.return_value = account

    use_case = ConfirmPasswordResetUseCase(mock_uow, reset_tokens)
    result = await use_case.execute("raw-token", "pw2")

    assert result.is_ok()
    assert result.value.message == "Password has been reset."
    reset_tokens.consume.assert_called_once_with(mock_uow.accounts, "raw-token", "pw2")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_invalid_token(mock_uow, reset_tokens):
    reset_tokens.consume.return_value = None

    use_case = ConfirmPasswordResetUseCase(mock_uow, reset_tokens)
    result = await use_case.execute("wrong-token", "pw2")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    assert result.error.message == "Invalid or expired reset token."
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("token, password", [(None, "pw2"), ("raw-token", None), ("", "")])
async def test_missing_fields(mock_uow, reset_tokens, token, password):
    use_case = ConfirmPasswordResetUseCase(mock_uow, reset_tokens)

    result = await use_case.execute(token, password)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    reset_tokens.consume.assert_not_called()
