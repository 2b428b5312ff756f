"""In-memory repository implementations for testing."""

from .photo import InMemoryPhotoRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPhotoRepository",
    "InMemoryUserRepository",
]
