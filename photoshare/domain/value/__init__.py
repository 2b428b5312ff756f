"""Domain value objects for Photoshare."""

from photoshare.domain.value.identifiers import PhotoId, UserId
from photoshare.domain.value.types import (
    EventType,
    Permissions,
    PhotoSortOrder,
    SearchTerms,
    TagName,
    VoteDirection,
    normalize_tags,
)

__all__ = [
    # Identifiers
    "UserId",
    "PhotoId",
    # Types
    "EventType",
    "Permissions",
    "PhotoSortOrder",
    "SearchTerms",
    "TagName",
    "VoteDirection",
    "normalize_tags",
]
