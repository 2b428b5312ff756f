"""Domain layer DI providers."""

from dishka import Scope, provide

from photoshare.config import AuthSettings
from photoshare.domain.repository import PhotoRepository, UserRepository
from photoshare.domain.service import (
    PasswordService,
    PhotoService,
    PhotoValidator,
    SessionService,
    UserService,
    UserValidator,
)
from photoshare.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services that wrap repositories are REQUEST-scoped to align with the
    repository/session lifecycle. Stateless ones live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session token service."""
        return SessionService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_photo_validator(self) -> PhotoValidator:
        """Provide photo validator."""
        return PhotoValidator()

    @provide
    def get_user_validator(self, user_repository: UserRepository) -> UserValidator:
        """Provide user validator."""
        return UserValidator(user_repository=user_repository)

    @provide
    def get_photo_service(self, photo_repository: PhotoRepository) -> PhotoService:
        """Provide photo domain service."""
        return PhotoService(photo_repository=photo_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
