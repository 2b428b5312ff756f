"""Pillow-backed image storage.

Stores the uploaded original under the upload directory and a bounded
thumbnail under the thumbnail directory, both named after a fresh UUID.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import BinaryIO
from uuid import uuid4

from PIL import Image, ImageOps, UnidentifiedImageError
from starlette.concurrency import run_in_threadpool

from photoshare.adapter.error import ImageProcessingError
from photoshare.config import StorageSettings
from photoshare.domain.service.image import ImageProcessor

logger = logging.getLogger(__name__)

# Declared content type -> (file extension, Pillow format)
FORMATS = {
    "image/png": (".png", "PNG"),
    "image/jpeg": (".jpg", "JPEG"),
}


class PillowImageProcessor(ImageProcessor):
    """Decodes uploads with Pillow and writes original + thumbnail to disk."""

    def __init__(self, storage_settings: StorageSettings) -> None:
        self.upload_dir = Path(storage_settings.upload_dir)
        self.thumbnail_dir = Path(storage_settings.thumbnail_dir)
        self.thumbnail_size = storage_settings.thumbnail_size

    async def process(self, stream: BinaryIO, content_type: str) -> str:
        # Pillow is blocking; keep it off the event loop
        return await run_in_threadpool(self._store, stream, content_type)

    def _store(self, stream: BinaryIO, content_type: str) -> str:
        if content_type not in FORMATS:
            raise ImageProcessingError(f"Unsupported content type: {content_type}")
        extension, image_format = FORMATS[content_type]

        data = stream.read()
        if not data:
            raise ImageProcessingError("Empty image upload")

        try:
            with Image.open(BytesIO(data)) as candidate:
                candidate.verify()

            filename = f"{uuid4().hex}{extension}"
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            self.thumbnail_dir.mkdir(parents=True, exist_ok=True)

            (self.upload_dir / filename).write_bytes(data)

            # verify() leaves the image unusable, so decode again
            with Image.open(BytesIO(data)) as im:
                thumb = ImageOps.exif_transpose(im)
                thumb.thumbnail((self.thumbnail_size, self.thumbnail_size))
                if image_format == "JPEG":
                    thumb = thumb.convert("RGB")
                thumb.save(self.thumbnail_dir / filename, format=image_format)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            logger.warning(f"Failed to process uploaded image: {e}")
            raise ImageProcessingError(f"Could not process image: {e}") from e

        logger.info(f"Stored image {filename} ({len(data)} bytes)")
        return filename

    async def remove(self, filename: str) -> None:
        await run_in_threadpool(self._remove, filename)

    def _remove(self, filename: str) -> None:
        # Stored names are bare; anything else never came from _store
        if Path(filename).name != filename:
            raise ImageProcessingError(f"Invalid stored filename: {filename}")
        try:
            (self.upload_dir / filename).unlink(missing_ok=True)
            (self.thumbnail_dir / filename).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove image {filename}: {e}")
            raise ImageProcessingError(f"Could not remove image: {e}") from e
        logger.info(f"Removed image {filename}")


class MockImageProcessor(ImageProcessor):
    """In-memory image processor for testing.

    Records every call and never touches the filesystem. Set `fail` to make
    the next calls raise ImageProcessingError.
    Removed filenames are kept in `removed`.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[bytes, str]] = []
        self.removed: list[str] = []
        self.fail = False

    async def process(self, stream: BinaryIO, content_type: str) -> str:
        self.calls.append((stream.read(), content_type))
        if self.fail:
            raise ImageProcessingError("Mock image processing failure")
        extension, _ = FORMATS.get(content_type, (".bin", ""))
        return f"{uuid4().hex}{extension}"

    async def remove(self, filename: str) -> None:
        if self.fail:
            raise ImageProcessingError("Mock image removal failure")
        self.removed.append(filename)
