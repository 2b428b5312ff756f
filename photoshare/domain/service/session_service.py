"""Session token domain service."""

import hashlib
from uuid import UUID

import logfire

from photoshare.config import AuthSettings
from photoshare.domain.model import User
from photoshare.domain.value import UserId
from photoshare.util.jwt import (
    RecoveryPayload,
    TokenPayload,
    create_recovery_code,
    create_token,
    verify_recovery_code,
    verify_token,
)

from .base import Service


class SessionService(Service):
    """Issues and reads session tokens (JWT)."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a session token for the user.

        Args:
            user: Logged-in user

        Returns:
            JWT token string
        """
        with logfire.span("session_service.create_token", user_id=str(user.id)):
            token = create_token(str(user.id), user.name, self.auth_settings)
            logfire.info("Session token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify session token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("session_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from a session token without raising exceptions.

        Missing, invalid and expired tokens all mean an anonymous caller.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.user_id))
        except Exception as e:
            logfire.debug(
                "Session token rejected, treating as anonymous", error=str(e)
            )
            return None

    def create_recovery_code(self, user: User) -> str:
        """Create a password recovery code for the user.

        The code is bound to the user's current password, so it stops
        working once the password changes.
        """
        with logfire.span("session_service.create_recovery_code", user_id=str(user.id)):
            code = create_recovery_code(
                str(user.id), password_fingerprint(user), self.auth_settings
            )
            logfire.info("Recovery code created", user_id=str(user.id))
            return code

    def verify_recovery_code(self, code: str) -> RecoveryPayload:
        """Verify a recovery code and extract its payload.

        Raises:
            JWTError: If the code is invalid, expired or not a recovery code
        """
        with logfire.span("session_service.verify_recovery_code"):
            try:
                return verify_recovery_code(code, self.auth_settings)
            except Exception as e:
                logfire.warn("Recovery code verification failed", error=str(e))
                raise


def password_fingerprint(user: User) -> str:
    """Digest of the user's stored password hash."""
    return hashlib.sha256(user.password.encode()).hexdigest()
