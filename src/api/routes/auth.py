from typing import Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Response, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.cookies import clear_session_cookie, set_session_cookie
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.session_token_codec import SessionTokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    CredentialsCommand,
    SignupUseCase,
    SigninUseCase,
    LoadSessionUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    AuthResponse,
    SessionResponse,
    MessageResponse,
    RequestPasswordResetResponse,
)
from src.app.use_cases.auth import messages
from src.depends import (
    get_current_account_id,
    get_password_hasher,
    get_reset_token_manager,
    get_settings,
    get_token_codec,
    get_unit_of_work,
    get_unit_of_work_factory,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class CredentialsRequest(BaseModel):
    """
    Signup / signin HTTP request payload

    Fields are optional here so that missing values reach the use case
    and produce a 400 VALIDATION_ERROR rather than FastAPI's 422.
    """

    email: Optional[str] = Field(default=None, description="Account email address")
    password: Optional[str] = Field(default=None, description="Account password")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def signup(
    request: CredentialsRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_codec: SessionTokenCodec = Depends(get_token_codec),
    config=Depends(get_settings),
):
    """
    Account Signup

    Creates an account and starts a session (sets the auth_token cookie).

    Raises:
        - 400 Bad Request: Missing email or password
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = CredentialsCommand(email=request.email, password=request.password)

    use_case = SignupUseCase(uow, hasher, token_codec)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    set_session_cookie(response, result.value.session_token, config)
    return result.value.to_response()


@router.post("/signin", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def signin(
    request: CredentialsRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_codec: SessionTokenCodec = Depends(get_token_codec),
    config=Depends(get_settings),
):
    """
    Account Signin

    Raises:
        - 400 Bad Request: Missing email or password
        - 401 Unauthorized: Invalid credentials (same for unknown email)
        - 500 Internal Server Error: Server error
    """
    command = CredentialsCommand(email=request.email, password=request.password)

    use_case = SigninUseCase(uow, hasher, token_codec)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    set_session_cookie(response, result.value.session_token, config)
    return result.value.to_response()


@router.post("/signout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def signout(response: Response, config=Depends(get_settings)):
    """
    Signout

    Clears the session cookie. Tokens are stateless, so a copy of the token
    stays valid until its own expiry.
    """
    clear_session_cookie(response, config)
    return MessageResponse(message=messages.SIGNOUT_SUCCESS)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=SessionResponse)
async def me(
    account_id: UUID = Depends(get_current_account_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Session Check

    Raises:
        - 401 Unauthorized: Missing, invalid or expired session cookie
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = LoadSessionUseCase(uow)
    result = await use_case.execute(account_id)

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot-password HTTP request payload"""

    email: Optional[str] = Field(default=None, description="Account email address")


@router.post(
    "/forgot",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
    response_model_exclude_none=True,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    uow_factory=Depends(get_unit_of_work_factory),
    reset_tokens: ResetTokenManager = Depends(get_reset_token_manager),
    config=Depends(get_settings),
):
    """
    Request Password Reset

    Security:
        - No email enumeration: outside dev mode the response is sent before
          the account lookup, which runs as a background task
        - Dev mode returns the raw token as resetToken. Never enable it
          in production.

    Raises:
        - 400 Bad Request: Missing email
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(
        uow_factory,
        reset_tokens,
        defer=background_tasks.add_task,
        dev_mode=config.reset_token_echo(),
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset-password HTTP request payload"""

    token: Optional[str] = Field(default=None, description="Raw reset token")
    password: Optional[str] = Field(default=None, description="New password")


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    reset_tokens: ResetTokenManager = Depends(get_reset_token_manager),
):
    """
    Confirm Password Reset

    Does not start a session; the user signs in with the new password.

    Raises:
        - 400 Bad Request: Missing fields, or invalid/expired/used token
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow, reset_tokens)
    result = await use_case.execute(request.token, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "INVALID_TOKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
