"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from photoshare.config import AuthSettings

RECOVERY_PURPOSE = "recover_password"


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    name: str
    exp: datetime


class RecoveryPayload(BaseModel):
    """Password recovery code payload.

    `fingerprint` ties the code to the password it was issued against.
    """

    user_id: str
    purpose: str
    fingerprint: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: str, name: str, settings: AuthSettings) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        name: User name
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "name": name,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Recovery codes are signed with the same secret but are not session
    tokens, so they are rejected here.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    payload = _decode(token, settings)
    if "purpose" in payload:
        raise JWTError("Not a session token")
    try:
        return TokenPayload(**payload)
    except ValidationError:
        raise JWTError("Invalid token")


def create_recovery_code(
    user_id: str, fingerprint: str, settings: AuthSettings
) -> str:
    """Create a short-lived password recovery code.

    Args:
        user_id: User ID
        fingerprint: Digest of the user's current password hash
        settings: Authentication settings

    Returns:
        Encoded JWT recovery code
    """
    expiry = datetime.now(timezone.utc) + timedelta(
        minutes=settings.recovery_code_expiry_minutes
    )

    payload = {
        "user_id": user_id,
        "purpose": RECOVERY_PURPOSE,
        "fingerprint": fingerprint,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_recovery_code(code: str, settings: AuthSettings) -> RecoveryPayload:
    """Verify and decode a password recovery code.

    Raises:
        JWTError: If the code is invalid, expired or a session token
    """
    payload = _decode(code, settings)
    if payload.get("purpose") != RECOVERY_PURPOSE:
        raise JWTError("Not a recovery code")
    try:
        return RecoveryPayload(**payload)
    except ValidationError:
        raise JWTError("Invalid token")


def _decode(token: str, settings: AuthSettings) -> dict:
    try:
        return jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
