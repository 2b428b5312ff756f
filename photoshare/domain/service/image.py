"""Image processing port."""

from abc import ABC, abstractmethod
from typing import BinaryIO

# Uploads with any other declared content type are rejected before processing
ALLOWED_CONTENT_TYPES = ("image/png", "image/jpeg")


def is_allowed_content_type(content_type: str | None) -> bool:
    """Exact, case-sensitive match against the allow-list."""
    return content_type in ALLOWED_CONTENT_TYPES


class ImageProcessor(ABC):
    """Stores uploaded images.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def process(self, stream: BinaryIO, content_type: str) -> str:
        """Store an uploaded image and return its stored filename.

        Args:
            stream: Readable binary stream with the image bytes
            content_type: Declared content type, already allow-listed

        Returns:
            Filename under which the image was stored

        Raises:
            ImageProcessingError: If the image cannot be read or stored
        """
        pass

    @abstractmethod
    async def remove(self, filename: str) -> None:
        """Remove a stored image and its derivatives.

        Already missing files are not an error.

        Raises:
            ImageProcessingError: If the files exist but can't be removed
        """
        pass
