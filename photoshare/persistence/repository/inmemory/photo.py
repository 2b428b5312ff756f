"""In-memory photo repository for testing."""

from collections import Counter
from typing import Optional

from photoshare.domain.model import Photo, TagCount
from photoshare.domain.repository import PhotoRepository
from photoshare.domain.value import (
    PhotoId,
    PhotoSortOrder,
    SearchTerms,
    UserId,
    VoteDirection,
)


def _matches(photo: Photo, terms: SearchTerms) -> bool:
    tags = set(photo.tag_names)
    title = photo.title.lower()
    if any(tag.root not in tags for tag in terms.tags):
        return False
    return all(word in title or word in tags for word in terms.words)


def _newest_first(photos: list[Photo]) -> list[Photo]:
    return sorted(photos, key=lambda p: p.created_at, reverse=True)


class InMemoryPhotoRepository(PhotoRepository):
    """In-memory implementation of PhotoRepository for testing."""

    def __init__(self) -> None:
        self._photos: dict[PhotoId, Photo] = {}

    async def find_by_id(self, photo_id: PhotoId) -> Optional[Photo]:
        return self._photos.get(photo_id)

    async def find_all(
        self,
        sort: PhotoSortOrder = PhotoSortOrder.CREATED,
        limit: int = 32,
        offset: int = 0,
    ) -> list[Photo]:
        photos = _newest_first(list(self._photos.values()))
        if sort == PhotoSortOrder.VOTES:
            # Stable sort keeps newest first within equal scores
            photos.sort(key=lambda p: p.score, reverse=True)
        return photos[offset : offset + limit]

    async def count(self) -> int:
        return len(self._photos)

    async def search(
        self, terms: SearchTerms, limit: int = 32, offset: int = 0
    ) -> list[Photo]:
        photos = [p for p in self._photos.values() if _matches(p, terms)]
        return _newest_first(photos)[offset : offset + limit]

    async def count_search(self, terms: SearchTerms) -> int:
        return sum(1 for p in self._photos.values() if _matches(p, terms))

    async def find_by_owner(
        self, owner_id: UserId, limit: int = 32, offset: int = 0
    ) -> list[Photo]:
        photos = [p for p in self._photos.values() if p.owner_id == owner_id]
        return _newest_first(photos)[offset : offset + limit]

    async def count_by_owner(self, owner_id: UserId) -> int:
        return sum(1 for p in self._photos.values() if p.owner_id == owner_id)

    async def save(self, photo: Photo) -> Photo:
        """Save or update a photo. Existing vote counts are kept."""
        existing = self._photos.get(photo.id)
        if existing:
            photo = photo.model_copy(
                update={
                    "up_votes": existing.up_votes,
                    "down_votes": existing.down_votes,
                }
            )
        self._photos[photo.id] = photo
        return photo

    async def delete(self, photo_id: PhotoId) -> None:
        self._photos.pop(photo_id, None)

    async def increment_votes(
        self, photo_id: PhotoId, direction: VoteDirection
    ) -> Optional[Photo]:
        photo = self._photos.get(photo_id)
        if photo is None:
            return None
        updated = photo.with_vote(direction)
        self._photos[photo_id] = updated
        return updated

    async def tag_counts(self) -> list[TagCount]:
        counter = Counter(name for p in self._photos.values() for name in p.tag_names)
        return [
            TagCount(tag=tag, count=count)
            for tag, count in sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))
        ]
