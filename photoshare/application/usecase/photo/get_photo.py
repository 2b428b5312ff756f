"""Get photo detail use case."""

import logfire
from pydantic import BaseModel

from photoshare.domain.model import PhotoDetail
from photoshare.domain.service import PhotoService, UserService, permissions_for

from .common import PhotoDetailItem, PhotoItem, load_photo, load_viewer


class GetPhotoRequest(BaseModel):
    """Get photo request."""

    photo_id: str  # Raw path parameter
    user_id: str | None = None  # Requesting user, None if anonymous


class GetPhotoUseCase:
    """Use case for getting a single photo as seen by the caller."""

    def __init__(self, photo_service: PhotoService, user_service: UserService) -> None:
        """Initialize get photo use case.

        Args:
            photo_service: Photo domain service
            user_service: User domain service
        """
        self.photo_service = photo_service
        self.user_service = user_service

    async def execute(self, request: GetPhotoRequest) -> PhotoDetailItem:
        """Execute get photo flow.

        Permissions are computed for the requesting user; anonymous callers
        get none.

        Args:
            request: Get photo request

        Returns:
            Photo detail

        Raises:
            NotFoundError: If the ID is malformed or the photo doesn't exist
        """
        with logfire.span("get_photo.execute", photo_id=request.photo_id):
            photo = await load_photo(self.photo_service, request.photo_id)

            viewer = await load_viewer(self.user_service, request.user_id)

            owner = await self.user_service.find_by_id(photo.owner_id)

            detail = PhotoDetail(
                photo=photo,
                owner_name=owner.name if owner else "",
                perms=permissions_for(viewer, photo),
            )

            return PhotoDetailItem(
                **PhotoItem.from_photo(detail.photo).model_dump(),
                owner_name=detail.owner_name,
                perms=detail.perms,
            )
