"""User domain service."""

import logfire

from photoshare.domain.error import NotFoundError, PermissionDeniedError
from photoshare.domain.model import User
from photoshare.domain.repository import UserRepository
from photoshare.domain.value import PhotoId, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), name=user.name)
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if they don't exist."""
        with logfire.span("user_service.find_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def find_by_email(self, email: str) -> User | None:
        """Get user by email, or None if no account uses it."""
        with logfire.span("user_service.find_by_email"):
            return await self.user_repository.find_by_email(email)

    async def get_user_by_identifier(self, identifier: str) -> User | None:
        """Get user by name or email.

        Identifiers containing '@' are looked up as emails first.

        Args:
            identifier: User name or email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_identifier"):
            identifier = identifier.strip()
            if not identifier:
                return None

            if "@" in identifier:
                user = await self.user_repository.find_by_email(identifier)
                if user:
                    return user

            user = await self.user_repository.find_by_name(identifier)
            if user:
                logfire.info("User found", user_id=str(user.id), name=user.name)
            else:
                logfire.warn("User not found for identifier")
            return user

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save", user_id=str(user.id), name=user.name):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id), name=saved.name)
            return saved

    async def record_vote(self, user: User, photo_id: PhotoId) -> User:
        """Record that the user voted on a photo.

        Args:
            user: Voter
            photo_id: Photo voted on

        Returns:
            The user with the vote registered

        Raises:
            PermissionDeniedError: If a vote by this user is already stored
        """
        with logfire.span(
            "user_service.record_vote", user_id=str(user.id), photo_id=str(photo_id)
        ):
            if not await self.user_repository.add_vote(user.id, photo_id):
                logfire.warn(
                    "Duplicate vote", user_id=str(user.id), photo_id=str(photo_id)
                )
                raise PermissionDeniedError("vote on", str(photo_id), str(user.id))
            logfire.info("Vote recorded", user_id=str(user.id), photo_id=str(photo_id))
            return user.register_vote(photo_id)
