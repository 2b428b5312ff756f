"""Recovery code delivery infrastructure providers."""

from dishka import Scope, provide

from photoshare.adapter.mail.log import LoggingRecoveryCodeSender
from photoshare.domain.service import RecoveryCodeSender
from photoshare.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Recovery code delivery component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production recovery code delivery through the log."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_recovery_code_sender(self) -> RecoveryCodeSender:
        """Provide logging recovery code sender."""
        return LoggingRecoveryCodeSender()
