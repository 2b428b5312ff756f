"""Photo repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from photoshare.domain.model.photo import Photo
from photoshare.domain.model.tag import TagCount
from photoshare.domain.value import (
    PhotoId,
    PhotoSortOrder,
    SearchTerms,
    UserId,
    VoteDirection,
)


class PhotoRepository(ABC):
    """Repository for Photo aggregate.

    Defines the contract for photo persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, photo_id: PhotoId) -> Optional[Photo]:
        """Find a photo by ID.

        Args:
            photo_id: The photo's unique identifier

        Returns:
            The photo if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PhotoSortOrder = PhotoSortOrder.CREATED,
        limit: int = 32,
        offset: int = 0,
    ) -> List[Photo]:
        """Find photos with ordering and pagination.

        Args:
            sort: Sort order (votes or created)
            limit: Maximum number of photos to return
            offset: Number of photos to skip

        Returns:
            List of photos
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all photos."""
        pass

    @abstractmethod
    async def search(
        self, terms: SearchTerms, limit: int = 32, offset: int = 0
    ) -> List[Photo]:
        """Find photos matching every search term, newest first.

        Args:
            terms: Parsed search terms
            limit: Maximum number of photos to return
            offset: Number of photos to skip

        Returns:
            List of matching photos
        """
        pass

    @abstractmethod
    async def count_search(self, terms: SearchTerms) -> int:
        """Count photos matching every search term."""
        pass

    @abstractmethod
    async def find_by_owner(
        self, owner_id: UserId, limit: int = 32, offset: int = 0
    ) -> List[Photo]:
        """Find photos uploaded by a user, newest first.

        Args:
            owner_id: The owner's user ID
            limit: Maximum number of photos to return
            offset: Number of photos to skip

        Returns:
            List of the owner's photos
        """
        pass

    @abstractmethod
    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count photos uploaded by a user."""
        pass

    @abstractmethod
    async def save(self, photo: Photo) -> Photo:
        """Save a photo (create or update), including its tags.

        Args:
            photo: The photo to save

        Returns:
            The saved photo
        """
        pass

    @abstractmethod
    async def delete(self, photo_id: PhotoId) -> None:
        """Delete a photo together with its tag links and votes.

        Args:
            photo_id: The photo ID to delete
        """
        pass

    @abstractmethod
    async def increment_votes(
        self, photo_id: PhotoId, direction: VoteDirection
    ) -> Optional[Photo]:
        """Atomically add one vote to the up or down counter.

        Args:
            photo_id: The photo ID
            direction: Which counter to increment

        Returns:
            The updated photo, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def tag_counts(self) -> List[TagCount]:
        """Count photos per tag.

        Returns:
            Tags in use, most used first, ties broken by name
        """
        pass
