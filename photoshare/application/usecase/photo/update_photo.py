"""Edit photo title and tags use cases."""

import logfire
from pydantic import BaseModel

from photoshare.domain.error import PermissionDeniedError, ValidationFailedError
from photoshare.domain.model import Photo, User
from photoshare.domain.service import (
    NotificationSender,
    PhotoService,
    PhotoValidator,
    UserService,
    can_edit,
)
from photoshare.domain.value import EventType, normalize_tags

from .common import PhotoItem, broadcast, load_actor, load_photo


class UpdateTitleBody(BaseModel):
    """JSON body of an edit-title request."""

    title: str


class UpdateTagsBody(BaseModel):
    """JSON body of an edit-tags request."""

    tags: list[str]


class UpdatePhotoRequest(BaseModel):
    """Edit photo request.

    The body stays raw until the capability check has passed, so a caller
    who may not edit the photo gets 403 even for a malformed body.
    """

    photo_id: str  # Raw path parameter
    user_id: str  # User ID from authenticated user
    body: bytes = b""


async def load_editable_photo(
    photo_service: PhotoService, user_service: UserService, request: UpdatePhotoRequest
) -> tuple[User, Photo]:
    """Load the acting user and a photo they may edit.

    Raises:
        AuthenticationError: If the session user doesn't exist
        NotFoundError: If the photo doesn't exist
        PermissionDeniedError: If the user may not edit the photo
    """
    user = await load_actor(user_service, request.user_id)
    photo = await load_photo(photo_service, request.photo_id)

    if not can_edit(user, photo):
        logfire.warn(
            "Edit denied", photo_id=str(photo.id), user_id=str(user.id)
        )
        raise PermissionDeniedError("edit", str(photo.id), str(user.id))

    return user, photo


class UpdateTitleUseCase:
    """Use case for changing a photo's title."""

    def __init__(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        photo_validator: PhotoValidator,
        notification_sender: NotificationSender,
    ) -> None:
        """Initialize update title use case.

        Args:
            photo_service: Photo domain service
            user_service: User domain service
            photo_validator: Photo validator
            notification_sender: Broadcasts the change
        """
        self.photo_service = photo_service
        self.user_service = user_service
        self.photo_validator = photo_validator
        self.notification_sender = notification_sender

    async def execute(self, request: UpdatePhotoRequest) -> PhotoItem:
        """Execute update title flow.

        Args:
            request: Edit request with raw JSON body `{"title": ...}`

        Returns:
            Updated photo

        Raises:
            AuthenticationError: If the session user doesn't exist
            NotFoundError: If the photo doesn't exist
            PermissionDeniedError: If the user may not edit the photo
            pydantic.ValidationError: If the body is malformed
            ValidationFailedError: If the new title is invalid
        """
        user, photo = await load_editable_photo(
            self.photo_service, self.user_service, request
        )

        with logfire.span("update_title.execute", photo_id=str(photo.id)):
            body = UpdateTitleBody.model_validate_json(request.body)

            updated = photo.model_copy(update={"title": body.title.strip()})
            result = await self.photo_validator.validate(updated)
            if not result.ok:
                raise ValidationFailedError(result)

            saved = await self.photo_service.save_photo(updated)
            broadcast(
                self.notification_sender, user, saved.id, EventType.PHOTO_UPDATED
            )
            return PhotoItem.from_photo(saved)


class UpdateTagsUseCase:
    """Use case for replacing a photo's tags."""

    def __init__(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        notification_sender: NotificationSender,
    ) -> None:
        """Initialize update tags use case.

        Args:
            photo_service: Photo domain service
            user_service: User domain service
            notification_sender: Broadcasts the change
        """
        self.photo_service = photo_service
        self.user_service = user_service
        self.notification_sender = notification_sender

    async def execute(self, request: UpdatePhotoRequest) -> PhotoItem:
        """Execute update tags flow.

        Tags are normalized before saving.

        Args:
            request: Edit request with raw JSON body `{"tags": [...]}`

        Returns:
            Updated photo

        Raises:
            AuthenticationError: If the session user doesn't exist
            NotFoundError: If the photo doesn't exist
            PermissionDeniedError: If the user may not edit the photo
            pydantic.ValidationError: If the body is malformed
        """
        user, photo = await load_editable_photo(
            self.photo_service, self.user_service, request
        )

        with logfire.span("update_tags.execute", photo_id=str(photo.id)):
            body = UpdateTagsBody.model_validate_json(request.body)

            updated = photo.model_copy(update={"tags": normalize_tags(body.tags)})
            saved = await self.photo_service.save_photo(updated)
            broadcast(
                self.notification_sender, user, saved.id, EventType.PHOTO_UPDATED
            )
            return PhotoItem.from_photo(saved)
