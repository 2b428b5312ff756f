"""Delete photo use case."""

import logfire
from pydantic import BaseModel

from photoshare.domain.error import PermissionDeniedError
from photoshare.domain.service import (
    ImageProcessor,
    NotificationSender,
    PhotoService,
    UserService,
    can_delete,
)
from photoshare.domain.value import EventType

from .common import broadcast, load_actor, load_photo


class DeletePhotoRequest(BaseModel):
    """Delete photo request."""

    photo_id: str  # Raw path parameter
    user_id: str  # User ID from authenticated user


class DeletePhotoUseCase:
    """Use case for deleting a photo."""

    def __init__(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        image_processor: ImageProcessor,
        notification_sender: NotificationSender,
    ) -> None:
        """Initialize delete photo use case.

        Args:
            photo_service: Photo domain service
            user_service: User domain service
            image_processor: Removes the stored image files
            notification_sender: Broadcasts the deletion
        """
        self.photo_service = photo_service
        self.user_service = user_service
        self.image_processor = image_processor
        self.notification_sender = notification_sender

    async def execute(self, request: DeletePhotoRequest) -> None:
        """Execute delete flow.

        The row goes first; if the files can't be removed the error aborts
        the request and the row is rolled back with it.

        Args:
            request: Delete request

        Raises:
            AuthenticationError: If the session user doesn't exist
            NotFoundError: If the photo doesn't exist
            PermissionDeniedError: If the user may not delete the photo
            ImageProcessingError: If the stored image can't be removed
        """
        user = await load_actor(self.user_service, request.user_id)
        photo = await load_photo(self.photo_service, request.photo_id)

        with logfire.span(
            "delete_photo.execute", photo_id=str(photo.id), user_id=str(user.id)
        ):
            if not can_delete(user, photo):
                logfire.warn(
                    "Delete denied", photo_id=str(photo.id), user_id=str(user.id)
                )
                raise PermissionDeniedError("delete", str(photo.id), str(user.id))

            await self.photo_service.delete_photo(photo.id)
            await self.image_processor.remove(photo.filename)
            broadcast(
                self.notification_sender, user, photo.id, EventType.PHOTO_DELETED
            )
