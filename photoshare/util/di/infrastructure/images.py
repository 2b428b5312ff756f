"""Image storage infrastructure providers."""

from dishka import Scope, provide

from photoshare.adapter.image.pillow import PillowImageProcessor
from photoshare.config import StorageSettings
from photoshare.domain.service import ImageProcessor
from photoshare.util.di.base import ProviderBase


class ImagesProvider(ProviderBase):
    """Image storage component base."""

    __mock_component__ = "images"


class ProdImagesProvider(ImagesProvider):
    """Production image storage on the local filesystem via Pillow."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_processor(self, storage_settings: StorageSettings) -> ImageProcessor:
        """Provide Pillow image processor."""
        return PillowImageProcessor(storage_settings)
