"""Password recovery delivery port."""

from abc import ABC, abstractmethod

from photoshare.domain.model import User


class RecoveryCodeSender(ABC):
    """Delivers password recovery codes to users."""

    @abstractmethod
    async def send_recovery_code(self, user: User, code: str) -> None:
        """Deliver a recovery code to the user's email address.

        Args:
            user: Account being recovered
            code: Signed recovery code
        """
        pass
