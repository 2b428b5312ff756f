"""Photo use cases."""

from .common import PhotoDetailItem, PhotoItem, PhotoPageResponse, parse_page
from .delete_photo import DeletePhotoRequest, DeletePhotoUseCase
from .get_photo import GetPhotoRequest, GetPhotoUseCase
from .list_photos import (
    ListOwnerPhotosRequest,
    ListOwnerPhotosUseCase,
    ListPhotosRequest,
    ListPhotosUseCase,
    SearchPhotosRequest,
    SearchPhotosUseCase,
)
from .update_photo import UpdatePhotoRequest, UpdateTagsUseCase, UpdateTitleUseCase
from .upload_photo import UploadPhotoRequest, UploadPhotoUseCase
from .vote_photo import VotePhotoRequest, VotePhotoResponse, VotePhotoUseCase

__all__ = [
    "DeletePhotoRequest",
    "DeletePhotoUseCase",
    "GetPhotoRequest",
    "GetPhotoUseCase",
    "ListOwnerPhotosRequest",
    "ListOwnerPhotosUseCase",
    "ListPhotosRequest",
    "ListPhotosUseCase",
    "PhotoDetailItem",
    "PhotoItem",
    "PhotoPageResponse",
    "SearchPhotosRequest",
    "SearchPhotosUseCase",
    "UpdatePhotoRequest",
    "UpdateTagsUseCase",
    "UpdateTitleUseCase",
    "UploadPhotoRequest",
    "UploadPhotoUseCase",
    "VotePhotoRequest",
    "VotePhotoResponse",
    "VotePhotoUseCase",
    "parse_page",
]
