"""Shared pieces of the auth use cases."""

from datetime import datetime

from pydantic import BaseModel

from photoshare.domain.model import User


class UserItem(BaseModel):
    """User as returned to clients. Never carries the password hash."""

    id: str
    name: str
    email: str
    is_admin: bool
    votes: list[str]
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            votes=[str(photo_id) for photo_id in user.votes],
            created_at=user.created_at,
        )


class SessionResponse(BaseModel):
    """A logged-in user and their new session token."""

    user: UserItem
    token: str
