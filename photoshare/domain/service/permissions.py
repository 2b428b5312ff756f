"""Capability checks for photos.

Free functions over (user, photo) so the rules live apart from the
entities' data.
"""

from photoshare.domain.model.photo import Photo
from photoshare.domain.model.user import User
from photoshare.domain.value import Permissions


def can_edit(user: User | None, photo: Photo) -> bool:
    """Owners and admins may edit a photo's title and tags."""
    if user is None:
        return False
    return user.is_admin or photo.owner_id == user.id


def can_delete(user: User | None, photo: Photo) -> bool:
    """Owners and admins may delete a photo."""
    return can_edit(user, photo)


def can_vote(user: User | None, photo: Photo) -> bool:
    """Anyone but the owner may vote, once."""
    if user is None:
        return False
    if photo.owner_id == user.id:
        return False
    return not user.has_voted(photo.id)


def permissions_for(user: User | None, photo: Photo) -> Permissions:
    """Evaluate every capability for the requesting user."""
    return Permissions(
        edit=can_edit(user, photo),
        delete=can_delete(user, photo),
        vote=can_vote(user, photo),
    )
