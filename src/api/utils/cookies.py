"""
Session cookie helpers

The session token travels only in an HttpOnly, SameSite=Lax cookie,
marked Secure in production.
"""

from fastapi import Response

SESSION_COOKIE_NAME = "auth_token"


def set_session_cookie(response: Response, token: str, config) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        max_age=config.SESSION_TTL_SECONDS,
        path="/",
        httponly=True,
        samesite="lax",
        secure=config.is_production(),
    )


def clear_session_cookie(response: Response, config) -> None:
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=config.is_production(),
    )
