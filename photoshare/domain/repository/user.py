"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from photoshare.domain.model.user import User
from photoshare.domain.value import PhotoId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user (with their votes) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by name (case-insensitive).

        Args:
            name: The user's name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def add_vote(self, user_id: UserId, photo_id: PhotoId) -> bool:
        """Record that a user voted on a photo.

        Args:
            user_id: The voter
            photo_id: The photo voted on

        Returns:
            False if the user had already voted on the photo
        """
        pass
