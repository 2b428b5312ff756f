"""List tags use case."""

import logfire
from pydantic import BaseModel

from photoshare.domain.service import PhotoService


class TagItem(BaseModel):
    """Tag item in response."""

    tag: str
    count: int


class ListTagsUseCase:
    """Use case for listing tags in use, most popular first."""

    def __init__(self, photo_service: PhotoService) -> None:
        """Initialize list tags use case.

        Args:
            photo_service: Photo domain service
        """
        self.photo_service = photo_service

    async def execute(self) -> list[TagItem]:
        """Execute list tags flow.

        Returns:
            Every tag attached to at least one photo, by count then name
        """
        with logfire.span("list_tags.execute"):
            counts = await self.photo_service.tag_counts()
            items = [TagItem(tag=tc.tag, count=tc.count) for tc in counts]
            logfire.info("Tags listed", count=len(items))
            return items
