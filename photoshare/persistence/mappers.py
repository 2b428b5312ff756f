"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from photoshare.domain.model import Photo, User
from photoshare.domain.value import PhotoId, TagName, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any], votes: list[UUID] | None = None) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        votes: IDs of photos the user has voted on

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        password=row["password"],
        is_admin=row["is_admin"],
        votes=[PhotoId(_uuid(photo_id)) for photo_id in votes or []],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Votes live in their own table and are excluded.
    """
    return user.model_dump(exclude={"votes"})


def row_to_photo(row: Dict[str, Any], tag_names: list[str] | None = None) -> Photo:
    """Convert database row to Photo domain model.

    Args:
        row: Database row as dict
        tag_names: Tag names in display order

    Returns:
        Photo domain model
    """
    return Photo(
        id=PhotoId(_uuid(row["id"])),
        title=row["title"],
        owner_id=UserId(_uuid(row["owner_id"])),
        filename=row["filename"],
        tags=[TagName(name) for name in tag_names or []],
        up_votes=row["up_votes"],
        down_votes=row["down_votes"],
        created_at=row["created_at"],
    )


def photo_to_dict(photo: Photo) -> Dict[str, Any]:
    """Convert Photo domain model to database dict.

    Tags live in their own tables and are excluded.
    """
    return photo.model_dump(exclude={"tags"})
