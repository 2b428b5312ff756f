"""Vote on photo use case."""

import logfire
from pydantic import BaseModel

from photoshare.domain.error import NotFoundError, PermissionDeniedError
from photoshare.domain.service import PhotoService, UserService, can_vote
from photoshare.domain.value import VoteDirection

from .common import load_actor, load_photo


class VotePhotoRequest(BaseModel):
    """Vote request."""

    photo_id: str  # Raw path parameter
    user_id: str  # User ID from authenticated user
    direction: VoteDirection


class VotePhotoResponse(BaseModel):
    """Vote response."""

    photo_id: str
    up_votes: int
    down_votes: int


class VotePhotoUseCase:
    """Use case for voting a photo up or down.

    Votes are not broadcast.
    """

    def __init__(self, photo_service: PhotoService, user_service: UserService) -> None:
        """Initialize vote use case.

        Args:
            photo_service: Photo domain service
            user_service: User domain service
        """
        self.photo_service = photo_service
        self.user_service = user_service

    async def execute(self, request: VotePhotoRequest) -> VotePhotoResponse:
        """Execute vote flow.

        Steps:
        1. Check the user may vote (not the owner, hasn't voted yet)
        2. Record the vote against the user; a stored vote wins any race
        3. Atomically increment the photo's counter

        Args:
            request: Vote request

        Returns:
            Updated vote counts

        Raises:
            AuthenticationError: If the session user doesn't exist
            NotFoundError: If the photo doesn't exist
            PermissionDeniedError: If the user may not vote on the photo
        """
        user = await load_actor(self.user_service, request.user_id)
        photo = await load_photo(self.photo_service, request.photo_id)

        with logfire.span(
            "vote_photo.execute",
            photo_id=str(photo.id),
            user_id=str(user.id),
            direction=request.direction.value,
        ):
            if not can_vote(user, photo):
                logfire.warn(
                    "Vote denied", photo_id=str(photo.id), user_id=str(user.id)
                )
                raise PermissionDeniedError("vote on", str(photo.id), str(user.id))

            await self.user_service.record_vote(user, photo.id)

            updated = await self.photo_service.add_vote(photo.id, request.direction)
            if updated is None:
                # Deleted between lookup and update
                raise NotFoundError("Photo", str(photo.id))

            return VotePhotoResponse(
                photo_id=str(updated.id),
                up_votes=updated.up_votes,
                down_votes=updated.down_votes,
            )
