"""Auth use cases."""

from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .common import SessionResponse, UserItem
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginUseCase
from .recover_password import RecoverPasswordRequest, RecoverPasswordUseCase
from .signup import SignupRequest, SignupUseCase

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RecoverPasswordRequest",
    "RecoverPasswordUseCase",
    "SessionResponse",
    "SignupRequest",
    "SignupUseCase",
    "UserItem",
]
