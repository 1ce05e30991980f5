"""
Unit tests for RequestPasswordResetUseCase

Tests all business logic with mocked dependencies.
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.auth import RequestPasswordResetUseCase
from src.domain.entities import Account

GENERIC = "If that account exists, a reset token was created."


@pytest.fixture
def reset_tokens():
    manager = MagicMock()
    manager.issue = AsyncMock(return_value="raw-token")
    return manager


@pytest.fixture
def account():
    return Account(id=uuid4(), email="user@example.com", password_hash="hash")


@pytest.fixture
def deferred():
    """Collects (func, args) pairs the way BackgroundTasks.add_task would"""
    calls = []

    def defer(func, *args):
        calls.append((func, args))

    defer.calls = calls
    return defer


def build_use_case(mock_uow, reset_tokens, deferred, dev_mode):
    return RequestPasswordResetUseCase(
        lambda: mock_uow, reset_tokens, defer=deferred, dev_mode=dev_mode
    )


@pytest.mark.asyncio
async def test_dev_mode_echoes_token(mock_uow, reset_tokens, deferred, account):
    mock_uow.accounts.get_by_email.return_value = account

    use_case = build_use_case(mock_uow, reset_tokens, deferred, dev_mode=True)
    result = await use_case.execute("User@Example.com")

    assert result.is_ok()
    assert result.value.message == "Reset token generated (dev mode)."
    assert result.value.reset_token == "raw-token"
    mock_uow.accounts.get_by_email.assert_called_once_with("user@example.com")
    reset_tokens.issue.assert_called_once_with(mock_uow.accounts, account)
    mock_uow.commit.assert_called_once()
    assert deferred.calls == []


@pytest.mark.asyncio
async def test_dev_mode_unknown_email_gets_generic_response(mock_uow, reset_tokens, deferred):
    mock_uow.accounts.get_by_email.return_value = None

    use_case = build_use_case(mock_uow, reset_tokens, deferred, dev_mode=True)
    result = await use_case.execute("nobody@example.com")

    assert result.is_ok()
    assert result.value.message == GENERIC
    assert result.value.reset_token is None
    reset_tokens.issue.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_production_mode_defers_issuing(mock_uow, reset_tokens, deferred, account):
    """The response is built before the store is touched"""
    mock_uow.accounts.get_by_email.return_value = account

    use_case = build_use_case(mock_uow, reset_tokens, deferred, dev_mode=False)
    result = await use_case.execute(" User@Example.com ")

    assert result.is_ok()
    assert result.value.message == GENERIC
    assert result.value.reset_token is None
    mock_uow.accounts.get_by_email.assert_not_called()
    reset_tokens.issue.assert_not_called()
    assert deferred.calls == [(use_case.issue_token, ("user@example.com",))]

    func, args = deferred.calls[0]
    assert await func(*args) == "raw-token"
    reset_tokens.issue.assert_called_once_with(mock_uow.accounts, account)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_known_and_unknown_email_take_the_same_path_outside_dev_mode(
    mock_uow, reset_tokens, deferred, account
):
    use_case = build_use_case(mock_uow, reset_tokens, deferred, dev_mode=False)

    mock_uow.accounts.get_by_email.return_value = account
    known = await use_case.execute("user@example.com")
    mock_uow.accounts.get_by_email.return_value = None
    unknown = await use_case.execute("nobody@example.com")

    assert known.value.model_dump() == unknown.value.model_dump()
    assert [func for func, _ in deferred.calls] == [use_case.issue_token, use_case.issue_token]
    mock_uow.accounts.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_issue_token_for_unknown_email(mock_uow, reset_tokens, deferred):
    mock_uow.accounts.get_by_email.return_value = None

    use_case = build_use_case(mock_uow, reset_tokens, deferred, dev_mode=False)

    assert await use_case.issue_token("nobody@example.com") is None
    reset_tokens.issue.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("email", [None, "", "  "])
async def test_missing_email(mock_uow, reset_tokens, deferred, email):
    use_case = build_use_case(mock_uow, reset_tokens, deferred, dev_mode=False)

    result = await use_case.execute(email)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.message == "Email is required."
    assert deferred.calls == []
