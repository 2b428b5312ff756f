"""Unit tests for PhotoValidator and UserValidator."""

import pytest

from photoshare.domain.service import PhotoValidator, UserValidator
from photoshare.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_photo, make_user


class TestPhotoValidator:
    """Tests for PhotoValidator.validate()."""

    @pytest.mark.asyncio
    async def test_valid_photo(self):
        result = await PhotoValidator().validate(make_photo(make_user()))

        assert result.ok
        assert result.errors == {}

    @pytest.mark.asyncio
    async def test_blank_title(self):
        result = await PhotoValidator().validate(make_photo(make_user(), title="   "))

        assert not result.ok
        assert result.errors == {"title": "Title is missing"}

    @pytest.mark.asyncio
    async def test_overlong_title(self):
        photo = make_photo(make_user(), title="x" * 201)

        result = await PhotoValidator().validate(photo)

        assert "title" in result.errors

    @pytest.mark.asyncio
    async def test_missing_tags_and_image(self):
        photo = make_photo(make_user(), tags=[], filename="")

        result = await PhotoValidator().validate(photo)

        assert set(result.errors) == {"tags", "photo"}


class TestUserValidator:
    """Tests for UserValidator.validate()."""

    @pytest.mark.asyncio
    async def test_valid_user(self):
        validator = UserValidator(InMemoryUserRepository())

        result = await validator.validate(make_user("alice"), "s3cret")

        assert result.ok

    @pytest.mark.asyncio
    async def test_missing_fields(self):
        validator = UserValidator(InMemoryUserRepository())

        result = await validator.validate(make_user("", email=""), "")

        assert result.errors == {
            "name": "Name is missing",
            "email": "Email is missing",
            "password": "Password is missing",
        }

    @pytest.mark.asyncio
    async def test_overlong_name_and_malformed_email(self):
        validator = UserValidator(InMemoryUserRepository())

        result = await validator.validate(
            make_user("n" * 61, email="not-an-email"), "s3cret"
        )

        assert set(result.errors) == {"name", "email"}
        assert result.errors["email"] == "Invalid email address"

    @pytest.mark.asyncio
    async def test_name_and_email_must_be_unique_ignoring_case(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user("alice", email="alice@example.com"))
        validator = UserValidator(repo)

        result = await validator.validate(
            make_user("ALICE", email="Alice@Example.com"), "s3cret"
        )

        assert result.errors == {
            "name": "This name is already taken",
            "email": "This email is already taken",
        }
