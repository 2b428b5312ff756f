"""Notification infrastructure providers."""

from dishka import Scope, provide

from photoshare.adapter.notification.websocket import WebSocketNotificationHub
from photoshare.domain.service import NotificationSender
from photoshare.util.di.base import ProviderBase


class NotificationsProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notifications"


class ProdNotificationsProvider(NotificationsProvider):
    """Production notifications over in-process WebSockets.

    One hub per app: the WebSocket endpoint registers clients on it and use
    cases send through it.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_hub(self) -> WebSocketNotificationHub:
        """Provide the WebSocket hub."""
        return WebSocketNotificationHub()

    @provide(scope=Scope.APP)
    def get_notification_sender(
        self, hub: WebSocketNotificationHub
    ) -> NotificationSender:
        """Provide the hub as the notification sender."""
        return hub
