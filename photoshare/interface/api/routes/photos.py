"""Photo routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.datastructures import FormData, UploadFile

from photoshare.application.usecase.photo import (
    DeletePhotoRequest,
    DeletePhotoUseCase,
    GetPhotoRequest,
    GetPhotoUseCase,
    ListOwnerPhotosRequest,
    ListOwnerPhotosUseCase,
    ListPhotosRequest,
    ListPhotosUseCase,
    PhotoDetailItem,
    PhotoItem,
    PhotoPageResponse,
    SearchPhotosRequest,
    SearchPhotosUseCase,
    UpdatePhotoRequest,
    UpdateTagsUseCase,
    UpdateTitleUseCase,
    UploadPhotoRequest,
    UploadPhotoUseCase,
    parse_page,
)
from photoshare.config import AuthSettings
from photoshare.domain.error import ValidationFailedError
from photoshare.domain.service import SessionService
from photoshare.interface.api.session import current_user_id, require_user_id
from photoshare.interface.error import to_http_exception, validation_failed

router = APIRouter(prefix="/photos", tags=["photos"], route_class=DishkaRoute)


class DeletePhotoResponse(BaseModel):
    """Delete photo response."""

    success: bool


@router.post("", response_model=PhotoItem)
async def upload_photo(
    request: Request,
    upload_photo_use_case: FromDishka[UploadPhotoUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> PhotoItem | JSONResponse:
    """Upload a new photo.

    Requires authentication. Multipart form with `title`, space-delimited
    `taglist` and the image under `photo` (PNG or JPEG). The form is read
    here rather than declared as parameters, so a `photo` field that is not
    a file is a 400 instead of a request validation error.

    Returns:
        The saved photo, or 400 with field errors

    Raises:
        HTTPException: If not authenticated or the image can't be stored
    """
    user_id = require_user_id(request, session_service, auth_settings)

    form = await request.form()
    try:
        photo = form.get("photo")
        if not isinstance(photo, UploadFile):
            photo = None

        use_case_request = UploadPhotoRequest(
            user_id=user_id,
            title=_form_text(form, "title"),
            taglist=_form_text(form, "taglist"),
            content_type=photo.content_type if photo else None,
            stream=photo.file if photo else None,
        )
        try:
            return await upload_photo_use_case.execute(use_case_request)
        except ValidationFailedError as e:
            return validation_failed(e)
        except Exception as e:
            raise to_http_exception(e)
    finally:
        await form.close()


def _form_text(form: FormData, field: str) -> str:
    value = form.get(field)
    return value if isinstance(value, str) else ""


@router.get("", response_model=PhotoPageResponse)
async def list_photos(
    list_photos_use_case: FromDishka[ListPhotosUseCase],
    page: str | None = Query(default=None),
    order_by: str | None = Query(default=None, alias="orderBy"),
) -> PhotoPageResponse:
    """List all photos, newest first or by score with `orderBy=votes`."""
    try:
        return await list_photos_use_case.execute(
            ListPhotosRequest(page=parse_page(page), order_by=order_by)
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/search", response_model=PhotoPageResponse)
async def search_photos(
    search_photos_use_case: FromDishka[SearchPhotosUseCase],
    page: str | None = Query(default=None),
    q: str = Query(default=""),
) -> PhotoPageResponse:
    """Search photos by title words and `#tags`.

    Every term must match; an empty query returns an empty page.
    """
    try:
        return await search_photos_use_case.execute(
            SearchPhotosRequest(page=parse_page(page), query=q)
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/owner/{owner_id}", response_model=PhotoPageResponse)
async def list_owner_photos(
    owner_id: str,
    list_owner_photos_use_case: FromDishka[ListOwnerPhotosUseCase],
    page: str | None = Query(default=None),
) -> PhotoPageResponse:
    """List one user's photos, newest first."""
    try:
        return await list_owner_photos_use_case.execute(
            ListOwnerPhotosRequest(owner_id=owner_id, page=parse_page(page))
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/{photo_id}", response_model=PhotoDetailItem)
async def get_photo(
    photo_id: str,
    request: Request,
    get_photo_use_case: FromDishka[GetPhotoUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> PhotoDetailItem:
    """Get a photo with its owner and the caller's permissions.

    Authentication is optional; anonymous callers get no permissions.

    Raises:
        HTTPException: 404 if the photo doesn't exist
    """
    user_id = current_user_id(request, session_service, auth_settings)
    try:
        return await get_photo_use_case.execute(
            GetPhotoRequest(photo_id=photo_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e)


@router.delete("/{photo_id}", response_model=DeletePhotoResponse)
async def delete_photo(
    photo_id: str,
    request: Request,
    delete_photo_use_case: FromDishka[DeletePhotoUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> DeletePhotoResponse:
    """Delete a photo. Owners and admins only."""
    user_id = require_user_id(request, session_service, auth_settings)
    try:
        await delete_photo_use_case.execute(
            DeletePhotoRequest(photo_id=photo_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e)

    logfire.info("Photo deleted via API", photo_id=photo_id)
    return DeletePhotoResponse(success=True)


async def _update_photo(
    use_case: UpdateTitleUseCase | UpdateTagsUseCase,
    photo_id: str,
    user_id: str,
    request: Request,
) -> PhotoItem | JSONResponse:
    body = await request.body()
    try:
        return await use_case.execute(
            UpdatePhotoRequest(photo_id=photo_id, user_id=user_id, body=body)
        )
    except ValidationFailedError as e:
        return validation_failed(e)
    except ValidationError as e:
        logfire.warn("Malformed edit body", photo_id=photo_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Malformed request body",
        )
    except Exception as e:
        raise to_http_exception(e)


@router.put("/{photo_id}/title", response_model=PhotoItem)
async def update_title(
    photo_id: str,
    request: Request,
    update_title_use_case: FromDishka[UpdateTitleUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> PhotoItem | JSONResponse:
    """Change a photo's title. JSON body `{"title": ...}`.

    Owners and admins only.
    """
    user_id = require_user_id(request, session_service, auth_settings)
    return await _update_photo(update_title_use_case, photo_id, user_id, request)


@router.put("/{photo_id}/tags", response_model=PhotoItem)
async def update_tags(
    photo_id: str,
    request: Request,
    update_tags_use_case: FromDishka[UpdateTagsUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> PhotoItem | JSONResponse:
    """Replace a photo's tags. JSON body `{"tags": [...]}`.

    Owners and admins only.
    """
    user_id = require_user_id(request, session_service, auth_settings)
    return await _update_photo(update_tags_use_case, photo_id, user_id, request)
