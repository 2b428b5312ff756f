"""Change password use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from photoshare.domain.error import (
    AuthenticationError,
    InvalidRecoveryCodeError,
    ValidationFailedError,
)
from photoshare.domain.model import User, ValidationResult
from photoshare.domain.service import PasswordService, SessionService, UserService
from photoshare.domain.service.session_service import password_fingerprint
from photoshare.domain.value import UserId
from photoshare.util.jwt import JWTError

from .common import UserItem


class ChangePasswordRequest(BaseModel):
    """Change password request.

    Either `code` (from password recovery) or `user_id` (from the session)
    identifies the account.
    """

    password: str = ""
    code: str | None = None
    user_id: UserId | None = None


class ChangePasswordUseCase:
    """Use case for setting a new password."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        session_service: SessionService,
    ) -> None:
        """Initialize change password use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            session_service: Session and recovery code service
        """
        self.user_service = user_service
        self.password_service = password_service
        self.session_service = session_service

    async def execute(self, request: ChangePasswordRequest) -> UserItem:
        """Execute change password flow.

        Steps:
        1. Identify the user by recovery code, else by session
        2. Check the new password is present
        3. Hash and save it

        A recovery code is checked against the current password, so it
        works once.

        Args:
            request: Change password request

        Returns:
            The updated user

        Raises:
            InvalidRecoveryCodeError: If the code is invalid, expired or used
            AuthenticationError: If there is neither a code nor a session
            ValidationFailedError: If the new password is empty
        """
        with logfire.span("change_password.execute"):
            if request.code:
                user = await self._user_for_code(request.code)
            elif request.user_id is not None:
                user = await self.user_service.find_by_id(request.user_id)
                if user is None:
                    raise AuthenticationError("Session user no longer exists")
            else:
                raise AuthenticationError("Password change requires a session")

            if not request.password:
                raise ValidationFailedError(
                    ValidationResult(errors={"password": "Password is missing"})
                )

            hashed = self.password_service.hash_password(request.password)
            saved = await self.user_service.save(
                user.model_copy(update={"password": hashed})
            )

            logfire.info("Password changed", user_id=str(saved.id))
            return UserItem.from_user(saved)

    async def _user_for_code(self, code: str) -> User:
        try:
            payload = self.session_service.verify_recovery_code(code)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            raise InvalidRecoveryCodeError()

        user = await self.user_service.find_by_id(user_id)
        if user is None or password_fingerprint(user) != payload.fingerprint:
            logfire.warn("Recovery code no longer valid", user_id=str(user_id))
            raise InvalidRecoveryCodeError()
        return user
