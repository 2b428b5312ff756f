"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ImageProcessingError(AdapterError):
    """Uploaded image could not be decoded or stored."""

    pass


class NotificationError(AdapterError):
    """Notification could not be queued."""

    pass
