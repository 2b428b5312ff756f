"""Notifications pushed to connected clients."""

from photoshare.domain.model.common import DomainModel
from photoshare.domain.value import EventType, PhotoId


class SocketMessage(DomainModel):
    """Ephemeral event describing a change to a photo.

    Built by a use case and handed straight to the notification sender;
    never persisted.
    """

    sender: str  # Acting user's name
    receiver: str = ""
    photo_id: PhotoId
    type: EventType
