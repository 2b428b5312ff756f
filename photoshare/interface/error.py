"""Translation of domain and adapter errors into HTTP responses."""

import logfire
from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from photoshare.adapter.error import AdapterError
from photoshare.domain.error import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    PermissionDeniedError,
    ValidationFailedError,
)

INTERNAL_ERROR = "Internal server error"


def validation_failed(error: ValidationFailedError) -> JSONResponse:
    """400 with the field-level validation result as the body."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error.result.model_dump(mode="json"),
    )


def to_http_exception(error: Exception) -> HTTPException:
    """Map an error raised by a use case to an HTTPException.

    Unknown errors become a generic 500; the cause is logged, never returned.
    """
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, PermissionDeniedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You may not {error.action} this photo",
        )
    if isinstance(error, AuthenticationError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    if isinstance(error, DomainError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, AdapterError):
        logfire.error("Adapter error", error=str(error), kind=type(error).__name__)
    else:
        logfire.exception("Unexpected error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR
    )
