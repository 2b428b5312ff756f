"""Validators for photos and users.

A validator returns a ValidationResult describing field-level problems.
Anything it raises is a system error, not a validation failure.
"""

import re

import logfire

from photoshare.domain.model.photo import Photo
from photoshare.domain.model.user import User
from photoshare.domain.model.validation import ValidationResult
from photoshare.domain.repository import UserRepository

MAX_TITLE_LENGTH = 200
MAX_NAME_LENGTH = 60

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class PhotoValidator:
    """Validates a photo before it is persisted."""

    async def validate(self, photo: Photo) -> ValidationResult:
        errors: dict[str, str] = {}

        title = photo.title.strip()
        if not title:
            errors["title"] = "Title is missing"
        elif len(title) > MAX_TITLE_LENGTH:
            errors["title"] = f"Title must be at most {MAX_TITLE_LENGTH} characters"

        if not photo.tags:
            errors["tags"] = "At least one tag is required"

        if not photo.filename:
            errors["photo"] = "Image is missing"

        if errors:
            logfire.info("Photo failed validation", fields=sorted(errors))

        return ValidationResult(errors=errors)


class UserValidator:
    """Validates a new user before signup.

    Name and email must be unique, which takes a repository lookup.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user validator.

        Args:
            user_repository: User repository for uniqueness checks
        """
        self.user_repository = user_repository

    async def validate(self, user: User, password: str) -> ValidationResult:
        """Validate a candidate user.

        Args:
            user: Candidate user
            password: Plain-text password as submitted

        Returns:
            Validation result

        Raises:
            Exception: Repository failures propagate as system errors
        """
        errors: dict[str, str] = {}

        name = user.name.strip()
        if not name:
            errors["name"] = "Name is missing"
        elif len(name) > MAX_NAME_LENGTH:
            errors["name"] = f"Name must be at most {MAX_NAME_LENGTH} characters"
        elif await self.user_repository.find_by_name(name):
            errors["name"] = "This name is already taken"

        email = user.email.strip()
        if not email:
            errors["email"] = "Email is missing"
        elif not EMAIL_PATTERN.match(email):
            errors["email"] = "Invalid email address"
        elif await self.user_repository.find_by_email(email):
            errors["email"] = "This email is already taken"

        if not password:
            errors["password"] = "Password is missing"

        if errors:
            logfire.info("User failed validation", fields=sorted(errors))

        return ValidationResult(errors=errors)
