"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from photoshare.domain.service import UserService

from photoshare.application.usecase.photo.common import load_viewer


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str | None = None  # From the session token, None if anonymous


class GetCurrentUserResponse(BaseModel):
    """Get current user response.

    Only `logged_in` is set for anonymous callers.
    """

    logged_in: bool
    id: str | None = None
    name: str | None = None
    email: str | None = None
    is_admin: bool | None = None
    votes: list[str] | None = None
    created_at: datetime | None = None


class GetCurrentUserUseCase:
    """Use case for getting the session's user, if any."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        user = await load_viewer(self.user_service, request.user_id)
        if user is None:
            return GetCurrentUserResponse(logged_in=False)

        return GetCurrentUserResponse(
            logged_in=True,
            id=str(user.id),
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            votes=[str(photo_id) for photo_id in user.votes],
            created_at=user.created_at,
        )
