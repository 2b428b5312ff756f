"""In-memory user repository for testing."""

from typing import Optional

from photoshare.domain.model import User
from photoshare.domain.repository import UserRepository
from photoshare.domain.value import PhotoId, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by name, ignoring case."""
        name = name.lower()
        for user in self._users.values():
            if user.name.lower() == name:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        email = email.lower()
        for user in self._users.values():
            if user.email.lower() == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def add_vote(self, user_id: UserId, photo_id: PhotoId) -> bool:
        """Record a vote on the stored user; False on a repeat."""
        user = self._users.get(user_id)
        if user is None or user.has_voted(photo_id):
            return False
        self._users[user_id] = user.register_vote(photo_id)
        return True
