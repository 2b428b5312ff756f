"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from photoshare.domain.model.common import DomainModel
from photoshare.domain.value import PhotoId, UserId


class User(DomainModel):
    """User aggregate root.

    `password` holds a passlib hash, never the plain text.
    `votes` lists every photo the user has voted on.
    """

    id: UserId
    name: str
    email: str
    password: str = ""
    is_admin: bool = False
    votes: list[PhotoId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def has_voted(self, photo_id: PhotoId) -> bool:
        return photo_id in self.votes

    def register_vote(self, photo_id: PhotoId) -> "User":
        """Return a copy that records a vote on the photo."""
        if self.has_voted(photo_id):
            return self
        return self.model_copy(update={"votes": [*self.votes, photo_id]})
