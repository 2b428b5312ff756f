"""Password hashing domain service."""

import logfire
from passlib.context import CryptContext

from photoshare.config import AuthSettings

from .base import Service


class PasswordService(Service):
    """Hashes and verifies user passwords with passlib."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings (hash schemes)
        """
        self.context = CryptContext(
            schemes=auth_settings.password_schemes, deprecated="auto"
        )

    def hash_password(self, password: str) -> str:
        return self.context.hash(password)

    def verify_password(self, password: str, hashed: str) -> bool:
        """Check a plain-text password against a stored hash.

        Unknown or empty hashes never verify.
        """
        if not hashed:
            return False
        try:
            return self.context.verify(password, hashed)
        except ValueError as e:
            logfire.warn("Unrecognized password hash", error=str(e))
            return False
