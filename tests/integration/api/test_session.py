from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.app.services.session_token_codec import SessionTokenCodec
from src.domain.entities import Account
from tests.integration.conftest import DevConfig
from tests.utils.json_compare import assert_error_body


@pytest.mark.asyncio
async def test_me_after_signup(client: AsyncClient, test_data):
    signup_response = await client.post("/api/auth/signup", json=test_data.credentials())

    response = await client.get("/api/auth/me")

    assert response.status_code == 200
    assert response.json() == {"user": signup_response.json()["user"]}


@pytest.mark.asyncio
async def test_me_without_cookie(client: AsyncClient):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert_error_body(response.json(), "NOT_AUTHENTICATED")


@pytest.mark.asyncio
async def test_me_with_tampered_cookie(client: AsyncClient):
    client.cookies.set("auth_token", "not.a.token")

    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert_error_body(response.json(), "INVALID_SESSION")


@pytest.mark.asyncio
async def test_me_with_expired_cookie(client: AsyncClient, test_data):
    signup_response = await client.post("/api/auth/signup", json=test_data.credentials())
    account_id = signup_response.json()["user"]["id"]

    nine_hours_ago = datetime.now(UTC) - timedelta(hours=9)
    stale_codec = SessionTokenCodec(DevConfig.JWT_SECRET, clock=lambda: nine_hours_ago)
    client.cookies.clear()
    client.cookies.set("auth_token", stale_codec.issue(account_id))

    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired session."


@pytest.mark.asyncio
async def test_me_with_token_for_other_secret(client: AsyncClient):
    client.cookies.set("auth_token", SessionTokenCodec("someone-elses-secret").issue(uuid4()))

    response = await client.get("/api/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_account_gone(client: AsyncClient, db_session, test_data):
    account = test_data.credentials()
    await client.post("/api/auth/signup", json=account)

    stored = (await db_session.exec(select(Account).where(Account.email == account["email"]))).one()
    await db_session.delete(stored)
    await db_session.commit()

    response = await client.get("/api/auth/me")

    assert response.status_code == 404
    assert_error_body(response.json(), "ACCOUNT_NOT_FOUND")


@pytest.mark.asyncio
async def test_signout_clears_cookie(client: AsyncClient, test_data):
    await client.post("/api/auth/signup", json=test_data.credentials())

    response = await client.post("/api/auth/signout")

    assert response.status_code == 200
    assert response.json() == {"message": "Signed out."}
    set_cookie = response.headers["set-cookie"].lower()
    assert set_cookie.startswith("auth_token=")
    assert "max-age=0" in set_cookie

    me_response = await client.get("/api/auth/me")
    assert me_response.status_code == 401


@pytest.mark.asyncio
async def test_signout_without_session(client: AsyncClient):
    response = await client.post("/api/auth/signout")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_token_survives_signout_until_expiry(client: AsyncClient, test_data):
    """Stateless sessions: signout only removes the cookie from the browser"""
    signup_response = await client.post("/api/auth/signup", json=test_data.credentials())
    token = signup_response.cookies["auth_token"]

    await client.post("/api/auth/signout")
    client.cookies.set("auth_token", token)

    response = await client.get("/api/auth/me")

    assert response.status_code == 200
