"""Domain services."""

from .base import Service
from .image import ALLOWED_CONTENT_TYPES, ImageProcessor, is_allowed_content_type
from .mail import RecoveryCodeSender
from .notification import NotificationSender
from .password_service import PasswordService
from .permissions import can_delete, can_edit, can_vote, permissions_for
from .photo_service import PhotoService
from .session_service import SessionService
from .user_service import UserService
from .validation import PhotoValidator, UserValidator

__all__ = [
    "ALLOWED_CONTENT_TYPES",
    "ImageProcessor",
    "NotificationSender",
    "PasswordService",
    "PhotoService",
    "PhotoValidator",
    "RecoveryCodeSender",
    "Service",
    "SessionService",
    "UserService",
    "UserValidator",
    "can_delete",
    "can_edit",
    "can_vote",
    "is_allowed_content_type",
    "permissions_for",
]
