"""Repository interfaces for Photoshare domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from photoshare.domain.repository.photo import PhotoRepository
from photoshare.domain.repository.user import UserRepository

__all__ = [
    "PhotoRepository",
    "UserRepository",
]
