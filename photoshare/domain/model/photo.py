"""Photo aggregate root."""

from datetime import datetime

from pydantic import Field

from photoshare.domain.model.common import DomainModel
from photoshare.domain.value import PhotoId, TagName, UserId, VoteDirection
from photoshare.domain.value.types import Permissions


class Photo(DomainModel):
    """Photo aggregate root.

    Title and tag rules are enforced by PhotoValidator rather than here, so an
    invalid candidate can still be built and reported field by field.
    """

    id: PhotoId
    title: str = ""
    owner_id: UserId
    filename: str = ""
    tags: list[TagName] = Field(default_factory=list)
    up_votes: int = Field(default=0, ge=0)
    down_votes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def score(self) -> int:
        """Net votes."""
        return self.up_votes - self.down_votes

    @property
    def tag_names(self) -> list[str]:
        """Tags as plain strings."""
        return [tag.root for tag in self.tags]

    def with_vote(self, direction: VoteDirection) -> "Photo":
        """Return a copy with one more vote in the given direction."""
        if direction == VoteDirection.UP:
            return self.model_copy(update={"up_votes": self.up_votes + 1})
        return self.model_copy(update={"down_votes": self.down_votes + 1})


class PhotoDetail(DomainModel):
    """A photo as seen by a particular (possibly anonymous) user."""

    photo: Photo
    owner_name: str
    perms: Permissions = Permissions()
