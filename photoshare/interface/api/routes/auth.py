"""Authentication routes: signup, login, session status, logout and passwords."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from photoshare.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RecoverPasswordRequest,
    RecoverPasswordUseCase,
    SignupRequest,
    SignupUseCase,
    UserItem,
)
from photoshare.application.usecase.auth.login import INVALID_CREDENTIALS
from photoshare.config import AuthSettings, Settings
from photoshare.domain.error import AuthenticationError, ValidationFailedError
from photoshare.domain.service import SessionService
from photoshare.interface.api.session import (
    attach_session,
    clear_session,
    current_user_id,
)
from photoshare.interface.error import to_http_exception, validation_failed

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class PasswordResponse(BaseModel):
    """Password recovery and change response."""

    success: bool
    message: str


class ChangePasswordBody(BaseModel):
    """New password, with the recovery code when there is no session."""

    password: str = ""
    code: str | None = None


@router.post("/signup", response_model=UserItem)
async def signup(
    response: Response,
    signup_use_case: FromDishka[SignupUseCase],
    settings: FromDishka[Settings],
    name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
) -> UserItem | JSONResponse:
    """Create an account and log it in.

    Form fields `name`, `email` and `password`. The session token is
    returned in the `X-Auth-Token` header and as the `auth_token` cookie.

    Returns:
        The new user, or 400 with field errors
    """
    try:
        result = await signup_use_case.execute(
            SignupRequest(name=name, email=email, password=password)
        )
    except ValidationFailedError as e:
        logger.info(f"Signup rejected: {sorted(e.result.errors)}")
        return validation_failed(e)
    except Exception as e:
        raise to_http_exception(e)

    logger.info(f"Signed up user {result.user.id}")
    attach_session(response, result.token, settings)
    return result.user


@router.post("/auth", response_model=UserItem)
async def login(
    request: Request,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> UserItem:
    """Log in with `{"identifier": name or email, "password": ...}`.

    Raises:
        HTTPException: 400 for a malformed body or bad credentials
    """
    try:
        login_request = LoginRequest.model_validate_json(await request.body())
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Malformed request body",
        )

    try:
        result = await login_use_case.execute(login_request)
    except AuthenticationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_CREDENTIALS,
        )
    except Exception as e:
        raise to_http_exception(e)

    logger.info(f"Login successful for user: {result.user.id}")
    attach_session(response, result.token, settings)
    return result.user


@router.get(
    "/auth", response_model=GetCurrentUserResponse, response_model_exclude_none=True
)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> GetCurrentUserResponse:
    """Get the session's user, or `{"logged_in": false}`.

    Safe to call without authentication: invalid or expired tokens are
    reported as logged out rather than as errors.
    """
    user_id = current_user_id(request, session_service, auth_settings)
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e)


@router.delete("/auth", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Log out by clearing the session cookie."""
    clear_session(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.put("/auth/recoverpass", response_model=PasswordResponse)
async def recover_password(
    request: Request,
    recover_password_use_case: FromDishka[RecoverPasswordUseCase],
) -> PasswordResponse:
    """Send a password recovery code to `{"email": ...}`.

    Succeeds whether or not the email belongs to an account.

    Raises:
        HTTPException: 400 for a malformed body
    """
    try:
        recover_request = RecoverPasswordRequest.model_validate_json(
            await request.body()
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Malformed request body",
        )

    try:
        await recover_password_use_case.execute(recover_request)
    except Exception as e:
        raise to_http_exception(e)

    return PasswordResponse(
        success=True, message="Check your email for a code to change your password"
    )


@router.put("/auth/changepass", response_model=PasswordResponse)
async def change_password(
    request: Request,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> PasswordResponse | JSONResponse:
    """Set a new password with `{"password": ..., "code": ...}`.

    The recovery code identifies the account; without one the caller must
    be logged in.

    Raises:
        HTTPException: 400 for a malformed body or bad code, 401 without
            a code or session
    """
    try:
        body = ChangePasswordBody.model_validate_json(await request.body())
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Malformed request body",
        )

    try:
        user = await change_password_use_case.execute(
            ChangePasswordRequest(
                password=body.password,
                code=body.code,
                user_id=current_user_id(request, session_service, auth_settings),
            )
        )
    except ValidationFailedError as e:
        return validation_failed(e)
    except Exception as e:
        raise to_http_exception(e)

    logger.info(f"Password changed for user {user.id}")
    return PasswordResponse(success=True, message="Your password has been updated")
