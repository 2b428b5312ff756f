"""Photo domain service."""

import logfire

from photoshare.domain.model.photo import Photo
from photoshare.domain.model.tag import TagCount
from photoshare.domain.repository import PhotoRepository
from photoshare.domain.value import (
    PhotoId,
    PhotoSortOrder,
    SearchTerms,
    UserId,
    VoteDirection,
)

from .base import Service


class PhotoService(Service):
    """Domain service for photo operations."""

    def __init__(self, photo_repository: PhotoRepository) -> None:
        """Initialize photo service.

        Args:
            photo_repository: Photo repository
        """
        self.photo_repository = photo_repository

    async def save_photo(self, photo: Photo) -> Photo:
        """Save a photo.

        Args:
            photo: Photo to save

        Returns:
            Saved photo
        """
        with logfire.span(
            "photo_service.save_photo", photo_id=str(photo.id), title=photo.title
        ):
            saved = await self.photo_repository.save(photo)
            logfire.info("Photo saved", photo_id=str(saved.id), tags=saved.tag_names)
            return saved

    async def get_photo_by_id(self, photo_id: PhotoId) -> Photo | None:
        """Get a photo by ID.

        Args:
            photo_id: Photo ID

        Returns:
            Photo if found, None otherwise
        """
        with logfire.span("photo_service.get_photo_by_id", photo_id=str(photo_id)):
            photo = await self.photo_repository.find_by_id(photo_id)

            if photo:
                logfire.info("Photo found", photo_id=str(photo_id), title=photo.title)
            else:
                logfire.warn("Photo not found", photo_id=str(photo_id))

            return photo

    async def delete_photo(self, photo_id: PhotoId) -> None:
        with logfire.span("photo_service.delete_photo", photo_id=str(photo_id)):
            await self.photo_repository.delete(photo_id)
            logfire.info("Photo deleted", photo_id=str(photo_id))

    async def list_photos(
        self, sort: PhotoSortOrder, limit: int, offset: int
    ) -> tuple[list[Photo], int]:
        """Get one page of all photos.

        Args:
            sort: Sort order
            limit: Page size
            offset: Number of photos to skip

        Returns:
            Photos on the page and the total number of photos
        """
        with logfire.span(
            "photo_service.list_photos", sort=sort.value, limit=limit, offset=offset
        ):
            photos = await self.photo_repository.find_all(
                sort=sort, limit=limit, offset=offset
            )
            total = await self.photo_repository.count()
            logfire.info("Photos listed", count=len(photos), total=total)
            return photos, total

    async def search_photos(
        self, terms: SearchTerms, limit: int, offset: int
    ) -> tuple[list[Photo], int]:
        """Get one page of photos matching a search.

        An empty search matches nothing.

        Args:
            terms: Parsed search terms
            limit: Page size
            offset: Number of photos to skip

        Returns:
            Matching photos on the page and the total number of matches
        """
        with logfire.span(
            "photo_service.search_photos",
            tags=[tag.root for tag in terms.tags],
            words=terms.words,
        ):
            if terms.is_empty:
                return [], 0

            photos = await self.photo_repository.search(
                terms, limit=limit, offset=offset
            )
            total = await self.photo_repository.count_search(terms)
            logfire.info("Photos searched", count=len(photos), total=total)
            return photos, total

    async def list_photos_by_owner(
        self, owner_id: UserId, limit: int, offset: int
    ) -> tuple[list[Photo], int]:
        """Get one page of a user's photos.

        Args:
            owner_id: Owner's user ID
            limit: Page size
            offset: Number of photos to skip

        Returns:
            The owner's photos on the page and their total
        """
        with logfire.span(
            "photo_service.list_photos_by_owner", owner_id=str(owner_id)
        ):
            photos = await self.photo_repository.find_by_owner(
                owner_id, limit=limit, offset=offset
            )
            total = await self.photo_repository.count_by_owner(owner_id)
            logfire.info(
                "Owner photos listed",
                owner_id=str(owner_id),
                count=len(photos),
                total=total,
            )
            return photos, total

    async def add_vote(
        self, photo_id: PhotoId, direction: VoteDirection
    ) -> Photo | None:
        """Atomically add a vote to a photo.

        Uses SQL-level increment to avoid race conditions.

        Args:
            photo_id: Photo ID
            direction: Which counter to increment

        Returns:
            Updated photo, None if the photo no longer exists
        """
        with logfire.span(
            "photo_service.add_vote",
            photo_id=str(photo_id),
            direction=direction.value,
        ):
            updated = await self.photo_repository.increment_votes(photo_id, direction)

            if updated:
                logfire.info(
                    "Photo vote counted",
                    photo_id=str(photo_id),
                    up_votes=updated.up_votes,
                    down_votes=updated.down_votes,
                )
            else:
                logfire.warn("Photo not found for vote", photo_id=str(photo_id))

            return updated

    async def tag_counts(self) -> list[TagCount]:
        with logfire.span("photo_service.tag_counts"):
            counts = await self.photo_repository.tag_counts()
            logfire.info("Tag counts retrieved", count=len(counts))
            return counts
