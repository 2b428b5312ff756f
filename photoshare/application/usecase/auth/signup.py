"""Signup use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from photoshare.config import AuthSettings
from photoshare.domain.error import ValidationFailedError
from photoshare.domain.model import User
from photoshare.domain.service import (
    PasswordService,
    SessionService,
    UserService,
    UserValidator,
)
from photoshare.domain.value import UserId

from .common import SessionResponse, UserItem


class SignupRequest(BaseModel):
    """Signup request."""

    name: str = ""
    email: str = ""
    password: str = ""


class SignupUseCase:
    """Use case for creating an account and logging it in."""

    def __init__(
        self,
        user_service: UserService,
        user_validator: UserValidator,
        password_service: PasswordService,
        session_service: SessionService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            user_validator: User validator
            password_service: Password hashing service
            session_service: Session token service
            auth_settings: Authentication settings (admin emails)
        """
        self.user_service = user_service
        self.user_validator = user_validator
        self.password_service = password_service
        self.session_service = session_service
        self.admin_emails = {email.lower() for email in auth_settings.admin_emails}

    async def execute(self, request: SignupRequest) -> SessionResponse:
        """Execute signup flow.

        Steps:
        1. Validate name, email and password (uniqueness included)
        2. Hash the password and save the user
        3. Open a session

        Args:
            request: Signup request

        Returns:
            The new user and their session token

        Raises:
            ValidationFailedError: If the candidate user is invalid
        """
        name = request.name.strip()
        email = request.email.strip()

        with logfire.span("signup.execute", name=name):
            candidate = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                is_admin=email.lower() in self.admin_emails,
                created_at=datetime.now(),
            )

            result = await self.user_validator.validate(candidate, request.password)
            if not result.ok:
                raise ValidationFailedError(result)

            hashed = self.password_service.hash_password(request.password)
            user = candidate.model_copy(update={"password": hashed})
            saved = await self.user_service.save(user)
            token = self.session_service.create_token(saved)

            logfire.info(
                "User signed up", user_id=str(saved.id), is_admin=saved.is_admin
            )
            return SessionResponse(user=UserItem.from_user(saved), token=token)
