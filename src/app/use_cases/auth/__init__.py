"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .signin_use_case import SigninUseCase
from .load_session_use_case import LoadSessionUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    CredentialsCommand,
    AccountInfo,
    AuthResult,
    AuthResponse,
    SessionResponse,
    MessageResponse,
    RequestPasswordResetResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "SigninUseCase",
    "LoadSessionUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "CredentialsCommand",
    # DTOs - Responses
    "AuthResult",
    "AuthResponse",
    "SessionResponse",
    "MessageResponse",
    "RequestPasswordResetResponse",
    # DTOs - Nested Models
    "AccountInfo",
]
