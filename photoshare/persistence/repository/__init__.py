"""PostgreSQL repository implementations."""

from photoshare.persistence.repository.photo import PostgresPhotoRepository
from photoshare.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresPhotoRepository",
    "PostgresUserRepository",
]
