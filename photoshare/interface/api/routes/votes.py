"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from photoshare.application.usecase.photo import (
    VotePhotoRequest,
    VotePhotoResponse,
    VotePhotoUseCase,
)
from photoshare.config import AuthSettings
from photoshare.domain.service import SessionService
from photoshare.domain.value import VoteDirection
from photoshare.interface.api.session import require_user_id
from photoshare.interface.error import to_http_exception

router = APIRouter(prefix="/photos", tags=["votes"], route_class=DishkaRoute)


async def _vote(
    photo_id: str,
    direction: VoteDirection,
    request: Request,
    vote_photo_use_case: VotePhotoUseCase,
    session_service: SessionService,
    auth_settings: AuthSettings,
) -> VotePhotoResponse:
    user_id = require_user_id(request, session_service, auth_settings)
    try:
        return await vote_photo_use_case.execute(
            VotePhotoRequest(photo_id=photo_id, user_id=user_id, direction=direction)
        )
    except Exception as e:
        raise to_http_exception(e)


@router.post("/{photo_id}/vote-up", response_model=VotePhotoResponse)
async def vote_up(
    photo_id: str,
    request: Request,
    vote_photo_use_case: FromDishka[VotePhotoUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> VotePhotoResponse:
    """Vote a photo up.

    Requires authentication. Owners can't vote on their own photos and
    nobody can vote twice.
    """
    return await _vote(
        photo_id,
        VoteDirection.UP,
        request,
        vote_photo_use_case,
        session_service,
        auth_settings,
    )


@router.post("/{photo_id}/vote-down", response_model=VotePhotoResponse)
async def vote_down(
    photo_id: str,
    request: Request,
    vote_photo_use_case: FromDishka[VotePhotoUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> VotePhotoResponse:
    """Vote a photo down. Same rules as voting up."""
    return await _vote(
        photo_id,
        VoteDirection.DOWN,
        request,
        vote_photo_use_case,
        session_service,
        auth_settings,
    )
