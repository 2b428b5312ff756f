"""Login use case."""

import logfire
from pydantic import BaseModel

from photoshare.domain.error import AuthenticationError
from photoshare.domain.service import PasswordService, SessionService, UserService

from .common import SessionResponse, UserItem

INVALID_CREDENTIALS = "Invalid email or password"


class LoginRequest(BaseModel):
    """Login request."""

    identifier: str  # User name or email
    password: str


class LoginUseCase:
    """Use case for logging in with name/email and password."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        session_service: SessionService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            session_service: Session token service
        """
        self.user_service = user_service
        self.password_service = password_service
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> SessionResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            The user and a new session token

        Raises:
            AuthenticationError: If no user matches the credentials
        """
        with logfire.span("login.execute"):
            user = await self.user_service.get_user_by_identifier(request.identifier)

            if user is None or not self.password_service.verify_password(
                request.password, user.password
            ):
                logfire.warn("Login failed")
                raise AuthenticationError(INVALID_CREDENTIALS)

            token = self.session_service.create_token(user)
            logfire.info("User logged in", user_id=str(user.id))
            return SessionResponse(user=UserItem.from_user(user), token=token)
