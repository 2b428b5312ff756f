"""Domain value objects for Photoshare.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from photoshare.domain.value.common import RootValueObject, ValueObject

MAX_TAG_LENGTH = 50


class VoteDirection(str, Enum):
    """Which counter a vote increments."""

    UP = "up"
    DOWN = "down"


class PhotoSortOrder(str, Enum):
    """Sort order for photo listings."""

    VOTES = "votes"  # Score (up - down) DESC, then newest
    CREATED = "created"  # created_at DESC

    @classmethod
    def parse(cls, value: str | None) -> "PhotoSortOrder":
        """Map a client-supplied orderBy value, defaulting to newest first."""
        if value == cls.VOTES.value:
            return cls.VOTES
        return cls.CREATED


class EventType(str, Enum):
    """Notification event types broadcast to connected clients."""

    PHOTO_UPLOADED = "photo_uploaded"
    PHOTO_UPDATED = "photo_updated"
    PHOTO_DELETED = "photo_deleted"


class TagName(RootValueObject[str]):
    """Normalized tag label.

    Lowercase, no whitespace, 1-50 characters.
    Examples: 'sunset', 'street-photography', 'nyc2014'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not v or len(v) > MAX_TAG_LENGTH:
            raise ValueError(f"Tag name must be 1-{MAX_TAG_LENGTH} characters")
        if re.search(r"\s", v):
            raise ValueError("Tag name must not contain whitespace")
        if v != v.lower():
            raise ValueError("Tag name must be lowercase")
        return v


def normalize_tags(raw_tags: list[str]) -> list[TagName]:
    """Turn free-text labels into tag names.

    Trims, strips a leading '#', lowercases, drops anything invalid and
    removes duplicates while keeping the caller's order.
    """
    seen: set[str] = set()
    tags: list[TagName] = []
    for raw in raw_tags:
        name = raw.strip().lstrip("#").lower()
        if not name or name in seen:
            continue
        if len(name) > MAX_TAG_LENGTH or re.search(r"\s", name):
            continue
        seen.add(name)
        tags.append(TagName(name))
    return tags


class Permissions(ValueObject):
    """What the requesting user may do with a photo."""

    edit: bool = False
    delete: bool = False
    vote: bool = False


class SearchTerms(ValueObject):
    """Parsed free-text photo search.

    '#tag' terms must match a tag exactly; every other word must appear in
    the title (case-insensitive) or equal one of the tags.
    """

    tags: list[TagName] = []
    words: list[str] = []

    @classmethod
    def parse(cls, query: str | None) -> "SearchTerms":
        tags: list[TagName] = []
        words: list[str] = []
        for term in (query or "").split():
            if term.startswith("#"):
                tags.extend(normalize_tags([term]))
            else:
                words.append(term.lower())
        return cls(tags=tags, words=words)

    @property
    def is_empty(self) -> bool:
        return not self.tags and not self.words
