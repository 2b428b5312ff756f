"""Unit tests for PasswordService."""

from photoshare.config import AuthSettings
from photoshare.domain.service import PasswordService


class TestPasswordService:
    """Tests for hashing and verifying passwords."""

    def test_hash_is_not_plain_text_and_verifies(self):
        service = PasswordService(AuthSettings())

        hashed = service.hash_password("correct horse")

        assert hashed != "correct horse"
        assert service.verify_password("correct horse", hashed)
        assert not service.verify_password("wrong horse", hashed)

    def test_hashes_are_salted(self):
        service = PasswordService(AuthSettings())

        assert service.hash_password("same") != service.hash_password("same")

    def test_empty_or_unknown_hash_never_verifies(self):
        service = PasswordService(AuthSettings())

        assert not service.verify_password("anything", "")
        assert not service.verify_password("anything", "not-a-real-hash")
