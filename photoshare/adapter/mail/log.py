"""Recovery code delivery through the application log.

No mail transport is configured; operators read the code from the log and
pass it on.
"""

import logging

from photoshare.domain.model import User
from photoshare.domain.service.mail import RecoveryCodeSender

logger = logging.getLogger(__name__)


class LoggingRecoveryCodeSender(RecoveryCodeSender):
    """Writes recovery codes to the log instead of sending email."""

    async def send_recovery_code(self, user: User, code: str) -> None:
        logger.info(f"Password recovery code for {user.email}: {code}")


class RecordingRecoveryCodeSender(RecoveryCodeSender):
    """Recovery code sender for testing.

    Keeps every `(email, code)` pair in `sent`.
    """

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    async def send_recovery_code(self, user: User, code: str) -> None:
        self.sent.append((user.email, code))
