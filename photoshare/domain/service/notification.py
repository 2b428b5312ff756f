"""Notification port."""

from abc import ABC, abstractmethod

from photoshare.domain.model.notification import SocketMessage


class NotificationSender(ABC):
    """Broadcasts events to connected clients.

    Delivery is best-effort: `send` must not wait for clients.
    """

    @abstractmethod
    def send(self, message: SocketMessage) -> None:
        """Queue a message for every connected client.

        Args:
            message: Event to broadcast
        """
        pass
