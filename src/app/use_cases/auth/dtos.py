"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Command DTOs
# ============================================================================


class CredentialsCommand(BaseModel):
    """Email/password pair for signup and signin (not yet validated)"""

    email: Optional[str] = None
    password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AccountInfo(BaseModel):
    """Public account fields; never carries the password hash"""

    id: str
    email: str


class AuthResponse(BaseModel):
    """HTTP body for signup and signin"""

    message: str
    user: AccountInfo


class AuthResult(BaseModel):
    """
    Output of signup and signin use cases.

    session_token is delivered only through the session cookie,
    never in the response body.
    """

    message: str
    user: AccountInfo
    session_token: str

    def to_response(self) -> AuthResponse:
        return AuthResponse(message=self.message, user=self.user)


class SessionResponse(BaseModel):
    """Response for session check"""

    user: AccountInfo


class MessageResponse(BaseModel):
    """Plain confirmation message"""

    message: str


class RequestPasswordResetResponse(BaseModel):
    """
    Response for forgot-password.

    reset_token is only present in dev mode and serialized as ``resetToken``.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    reset_token: Optional[str] = Field(default=None, alias="resetToken")
