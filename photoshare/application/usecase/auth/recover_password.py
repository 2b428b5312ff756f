"""Recover password use case."""

import logfire
from pydantic import BaseModel

from photoshare.domain.service import RecoveryCodeSender, SessionService, UserService


class RecoverPasswordRequest(BaseModel):
    """Recover password request."""

    email: str = ""


class RecoverPasswordUseCase:
    """Use case for mailing a password recovery code."""

    def __init__(
        self,
        user_service: UserService,
        session_service: SessionService,
        recovery_code_sender: RecoveryCodeSender,
    ) -> None:
        self.user_service = user_service
        self.session_service = session_service
        self.recovery_code_sender = recovery_code_sender

    async def execute(self, request: RecoverPasswordRequest) -> None:
        """Send a recovery code to the account registered under the email.

        Unknown emails are ignored, so callers cannot learn which
        addresses have accounts.
        """
        email = request.email.strip()

        with logfire.span("recover_password.execute"):
            user = await self.user_service.find_by_email(email) if email else None
            if user is None:
                logfire.info("Password recovery for unknown email ignored")
                return

            code = self.session_service.create_recovery_code(user)
            await self.recovery_code_sender.send_recovery_code(user, code)
            logfire.info("Password recovery code sent", user_id=str(user.id))
