"""Tag usage aggregate."""

from pydantic import Field

from photoshare.domain.model.common import DomainModel


class TagCount(DomainModel):
    """A tag and the number of photos carrying it."""

    tag: str
    count: int = Field(ge=0)
