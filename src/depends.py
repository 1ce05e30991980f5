from contextlib import asynccontextmanager
from typing import Optional
from uuid import UUID

from fastapi import Cookie, Depends, Request

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, INVALID_SESSION, NOT_AUTHENTICATED
from src.api.utils.cookies import SESSION_COOKIE_NAME
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.session_token_codec import SessionTokenCodec


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_unit_of_work_factory(request: Request):
    """
    Unit of Work factory for work that outlives the request's own session,
    such as background tasks. Each call opens a fresh session.
    """
    session_factory = request.app.state.session_factory

    @asynccontextmanager
    async def unit_of_work():
        async with session_factory() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                yield uow

    return unit_of_work


def get_settings(request: Request):
    return request.app.state.config


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_codec(request: Request) -> SessionTokenCodec:
    return request.app.state.token_codec


def get_reset_token_manager(request: Request) -> ResetTokenManager:
    return request.app.state.reset_tokens


async def get_current_account_id(
    session_token: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    token_codec: SessionTokenCodec = Depends(get_token_codec),
) -> UUID:
    """
    Session guard for protected routes.

    Reads the session cookie and verifies it.

    Returns:
        Verified account id

    Raises:
        ClientError: 401 if the cookie is missing, tampered with or expired
    """
    if not session_token:
        raise ClientError(NOT_AUTHENTICATED, status_code=401)

    account_id = token_codec.verify(session_token)
    if account_id is None:
        raise ClientError(INVALID_SESSION, status_code=401)

    return account_id
