"""Shared pieces of the photo use cases."""

import math
from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from photoshare.domain.error import AuthenticationError, NotFoundError
from photoshare.domain.model import Photo, SocketMessage, User
from photoshare.domain.service import NotificationSender, PhotoService, UserService
from photoshare.domain.value import EventType, Permissions, PhotoId, UserId


class PhotoItem(BaseModel):
    """Photo as returned to clients."""

    id: str
    title: str
    owner_id: str
    filename: str
    tags: list[str]
    up_votes: int
    down_votes: int
    score: int
    created_at: datetime

    @classmethod
    def from_photo(cls, photo: Photo) -> "PhotoItem":
        return cls(
            id=str(photo.id),
            title=photo.title,
            owner_id=str(photo.owner_id),
            filename=photo.filename,
            tags=photo.tag_names,
            up_votes=photo.up_votes,
            down_votes=photo.down_votes,
            score=photo.score,
            created_at=photo.created_at,
        )


class PhotoDetailItem(PhotoItem):
    """Photo plus owner name and what the caller may do with it."""

    owner_name: str
    perms: Permissions


class PhotoPageResponse(BaseModel):
    """One page of a photo listing."""

    photos: list[PhotoItem]
    total: int
    current_page: int
    num_pages: int

    @classmethod
    def build(
        cls, photos: list[Photo], total: int, page: int, page_size: int
    ) -> "PhotoPageResponse":
        return cls(
            photos=[PhotoItem.from_photo(photo) for photo in photos],
            total=total,
            current_page=page,
            num_pages=math.ceil(total / page_size) if total else 0,
        )


def parse_page(raw: str | None) -> int:
    """Parse a page number leniently; anything unusable means page 1."""
    try:
        page = int(raw) if raw is not None else 1
    except ValueError:
        return 1
    return page if page >= 1 else 1


def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def parse_photo_id(raw: str) -> PhotoId:
    """Parse a photo ID, treating malformed IDs as missing photos.

    Raises:
        NotFoundError: If the ID is not a UUID
    """
    try:
        return PhotoId(UUID(raw))
    except ValueError:
        raise NotFoundError("Photo", raw)


def parse_user_id(raw: str) -> UserId:
    """Parse a user ID, treating malformed IDs as missing users.

    Raises:
        NotFoundError: If the ID is not a UUID
    """
    try:
        return UserId(UUID(raw))
    except ValueError:
        raise NotFoundError("User", raw)


async def load_photo(photo_service: PhotoService, raw_photo_id: str) -> Photo:
    """Load a photo by its raw ID.

    Raises:
        NotFoundError: If the ID is malformed or the photo doesn't exist
    """
    photo_id = parse_photo_id(raw_photo_id)
    photo = await photo_service.get_photo_by_id(photo_id)
    if photo is None:
        raise NotFoundError("Photo", raw_photo_id)
    return photo


async def load_actor(user_service: UserService, raw_user_id: str) -> User:
    """Load the user behind a session.

    Raises:
        AuthenticationError: If the session's user no longer exists
    """
    try:
        user_id = UserId(UUID(raw_user_id))
    except ValueError:
        raise AuthenticationError("Malformed session user")

    user = await user_service.find_by_id(user_id)
    if user is None:
        raise AuthenticationError("Session user no longer exists")
    return user


def broadcast(
    notification_sender: NotificationSender,
    sender: User,
    photo_id: PhotoId,
    event_type: EventType,
) -> None:
    """Send a notification; failures are logged, never raised."""
    message = SocketMessage(sender=sender.name, photo_id=photo_id, type=event_type)
    try:
        notification_sender.send(message)
    except Exception as e:
        logfire.error(
            "Failed to send notification",
            type=event_type.value,
            photo_id=str(photo_id),
            error=str(e),
        )


async def load_viewer(
    user_service: UserService, raw_user_id: str | None
) -> User | None:
    """Load the optional requesting user; unknown sessions count as anonymous."""
    if not raw_user_id:
        return None
    try:
        return await load_actor(user_service, raw_user_id)
    except AuthenticationError:
        return None
