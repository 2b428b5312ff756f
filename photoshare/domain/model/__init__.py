"""Domain model entities for Photoshare."""

from photoshare.domain.model.notification import SocketMessage
from photoshare.domain.model.photo import Photo, PhotoDetail
from photoshare.domain.model.tag import TagCount
from photoshare.domain.model.user import User
from photoshare.domain.model.validation import ValidationResult

__all__ = [
    "Photo",
    "PhotoDetail",
    "SocketMessage",
    "TagCount",
    "User",
    "ValidationResult",
]
