"""
Use Cases

Organized into domain folders:
- auth/: Signup, signin, session check and password reset flows
- orders/: Order listing for the dashboard
"""

from .auth import (
    SignupUseCase,
    SigninUseCase,
    LoadSessionUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .orders import ListOrdersUseCase

__all__ = [
    # Auth
    "SignupUseCase",
    "SigninUseCase",
    "LoadSessionUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Orders
    "ListOrdersUseCase",
]
