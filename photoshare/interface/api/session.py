"""Session token transport.

The token travels in the `X-Auth-Token` header, falling back to the
`auth_token` cookie. Names come from AuthSettings.
"""

from fastapi import HTTPException, Request, Response, status

from photoshare.config import AuthSettings, Settings
from photoshare.domain.service import SessionService


def read_token(request: Request, auth_settings: AuthSettings) -> str | None:
    return request.headers.get(auth_settings.token_header) or request.cookies.get(
        auth_settings.cookie_name
    )


def current_user_id(
    request: Request, session_service: SessionService, auth_settings: AuthSettings
) -> str | None:
    """User ID of the session, None for anonymous or invalid sessions."""
    user_id = session_service.get_user_id_from_token(
        read_token(request, auth_settings)
    )
    return str(user_id) if user_id else None


def require_user_id(
    request: Request, session_service: SessionService, auth_settings: AuthSettings
) -> str:
    """User ID of the session.

    Raises:
        HTTPException: 401 if there is no valid session
    """
    user_id = current_user_id(request, session_service, auth_settings)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


def attach_session(response: Response, token: str, settings: Settings) -> None:
    """Return the token in the header and set it as an HTTP-only cookie."""
    auth = settings.auth
    response.headers[auth.token_header] = token
    response.set_cookie(
        key=auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/",
        max_age=auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session(response: Response, settings: Settings) -> None:
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
