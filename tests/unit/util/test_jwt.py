"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from photoshare.config import AuthSettings
from photoshare.util.jwt import (
    JWTError,
    create_recovery_code,
    create_token,
    verify_recovery_code,
    verify_token,
)

SETTINGS = AuthSettings(jwt_secret="test-secret", jwt_expiry_days=7)


def test_create_token_sets_expiry_from_settings():
    token = create_token("user-1", "alice", SETTINGS)

    payload = verify_token(token, SETTINGS)

    assert payload.user_id == "user-1"
    expected = datetime.now(timezone.utc) + timedelta(days=7)
    assert abs((payload.exp - expected).total_seconds()) < 60


def test_expired_token_raises():
    token = jwt.encode(
        {
            "user_id": "u",
            "name": "n",
            "exp": datetime.now(timezone.utc) - timedelta(seconds=5),
        },
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="expired"):
        verify_token(token, SETTINGS)


def test_tampered_token_raises():
    token = create_token("user-1", "alice", SETTINGS)

    with pytest.raises(JWTError, match="Invalid"):
        verify_token(token + "x", SETTINGS)


class TestRecoveryCode:
    """Recovery codes and session tokens are not interchangeable."""

    def test_recovery_code_expires_in_minutes(self):
        settings = SETTINGS.model_copy(update={"recovery_code_expiry_minutes": 15})
        code = create_recovery_code("user-1", "abc", settings)

        payload = verify_recovery_code(code, settings)

        assert payload.user_id == "user-1"
        assert payload.fingerprint == "abc"
        expected = datetime.now(timezone.utc) + timedelta(minutes=15)
        assert abs((payload.exp - expected).total_seconds()) < 60

    def test_recovery_code_is_not_a_session_token(self):
        code = create_recovery_code("user-1", "abc", SETTINGS)

        with pytest.raises(JWTError, match="session"):
            verify_token(code, SETTINGS)

    def test_session_token_is_not_a_recovery_code(self):
        token = create_token("user-1", "alice", SETTINGS)

        with pytest.raises(JWTError, match="recovery"):
            verify_recovery_code(token, SETTINGS)

    def test_expired_recovery_code_raises(self):
        code = jwt.encode(
            {
                "user_id": "u",
                "purpose": "recover_password",
                "fingerprint": "abc",
                "exp": datetime.now(timezone.utc) - timedelta(seconds=5),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_recovery_code(code, SETTINGS)
