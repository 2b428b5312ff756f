"""Upload photo use case."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import BaseModel

from photoshare.domain.error import ValidationFailedError
from photoshare.domain.model import Photo, ValidationResult
from photoshare.domain.service import (
    ImageProcessor,
    NotificationSender,
    PhotoService,
    PhotoValidator,
    UserService,
    is_allowed_content_type,
)
from photoshare.domain.value import EventType, PhotoId, normalize_tags

from .common import PhotoItem, broadcast, load_actor

NO_IMAGE_MESSAGE = "No image was posted"


class UploadPhotoRequest(BaseModel):
    """Upload photo request."""

    user_id: str  # User ID from authenticated user
    title: str = ""
    taglist: str = ""  # Space-delimited tags
    content_type: str | None = None
    stream: Any = None  # Readable binary stream, None when no file was posted


class UploadPhotoUseCase:
    """Use case for uploading a new photo."""

    def __init__(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        photo_validator: PhotoValidator,
        image_processor: ImageProcessor,
        notification_sender: NotificationSender,
    ) -> None:
        """Initialize upload photo use case.

        Args:
            photo_service: Photo domain service
            user_service: User domain service
            photo_validator: Photo validator
            image_processor: Stores the uploaded image
            notification_sender: Broadcasts the upload
        """
        self.photo_service = photo_service
        self.user_service = user_service
        self.photo_validator = photo_validator
        self.image_processor = image_processor
        self.notification_sender = notification_sender

    async def execute(self, request: UploadPhotoRequest) -> PhotoItem:
        """Execute upload flow.

        Steps:
        1. Reject missing images and disallowed content types
        2. Store the image (via ImageProcessor)
        3. Build and validate the Photo
        4. Save it and broadcast `photo_uploaded`

        Args:
            request: Upload request

        Returns:
            The saved photo

        Raises:
            AuthenticationError: If the session user doesn't exist
            ValidationFailedError: If no usable image was posted or the photo
                is invalid
            ImageProcessingError: If the image can't be stored
        """
        try:
            user = await load_actor(self.user_service, request.user_id)

            with logfire.span(
                "upload_photo.execute",
                user_id=str(user.id),
                title=request.title,
                content_type=request.content_type,
            ):
                if request.stream is None or not is_allowed_content_type(
                    request.content_type
                ):
                    logfire.warn(
                        "Upload rejected, no usable image",
                        content_type=request.content_type,
                    )
                    raise ValidationFailedError(
                        ValidationResult(errors={"photo": NO_IMAGE_MESSAGE})
                    )

                filename = await self.image_processor.process(
                    request.stream, request.content_type
                )

                photo = Photo(
                    id=PhotoId(uuid4()),
                    title=request.title.strip(),
                    owner_id=user.id,
                    filename=filename,
                    tags=normalize_tags(request.taglist.split(" ")),
                    created_at=datetime.now(),
                )

                result = await self.photo_validator.validate(photo)
                if not result.ok:
                    raise ValidationFailedError(result)

                saved = await self.photo_service.save_photo(photo)
                broadcast(
                    self.notification_sender,
                    user,
                    saved.id,
                    EventType.PHOTO_UPLOADED,
                )

                logfire.info(
                    "Photo uploaded",
                    photo_id=str(saved.id),
                    filename=saved.filename,
                )
                return PhotoItem.from_photo(saved)
        finally:
            if request.stream is not None:
                request.stream.close()
