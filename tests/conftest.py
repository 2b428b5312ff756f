"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from io import BytesIO
from uuid import uuid4

import logfire
import pytest
from PIL import Image

from photoshare.domain.model import Photo, User
from photoshare.domain.value import PhotoId, TagName, UserId

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(name: str = "alice", is_admin: bool = False, **kwargs) -> User:
    """Helper to build a user with sensible defaults."""
    return User(
        id=kwargs.pop("id", UserId(uuid4())),
        name=name,
        email=kwargs.pop("email", f"{name}@example.com"),
        is_admin=is_admin,
        **kwargs,
    )


def make_photo(
    owner: User,
    title: str = "Sunset over the bay",
    tags: list[str] | None = None,
    age_minutes: int = 0,
    **kwargs,
) -> Photo:
    """Helper to build a photo owned by `owner`.

    `age_minutes` backdates created_at so ordering is deterministic.
    """
    return Photo(
        id=kwargs.pop("id", PhotoId(uuid4())),
        title=title,
        owner_id=owner.id,
        filename=kwargs.pop("filename", f"{uuid4().hex}.jpg"),
        tags=[TagName(t) for t in (tags if tags is not None else ["sunset"])],
        created_at=datetime.now() - timedelta(minutes=age_minutes),
        **kwargs,
    )


def _encode(size: tuple[int, int], image_format: str) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, color=(200, 120, 40)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """A small PNG image."""
    return _encode((640, 480), "PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A small JPEG image."""
    return _encode((800, 600), "JPEG")


def signup(client, name: str, password: str = "s3cret") -> dict[str, str]:
    """Sign up through the API and return headers carrying the session token.

    The client's cookie jar is cleared so later requests are anonymous unless
    they pass the returned headers.
    """
    response = client.post(
        "/signup",
        data={"name": name, "email": f"{name}@example.com", "password": password},
    )
    assert response.status_code == 200, response.text
    client.cookies.clear()
    return {"X-Auth-Token": response.headers["X-Auth-Token"]}
