"""End-to-end tests for the photo endpoints."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from photoshare.domain.repository import PhotoRepository, UserRepository
from photoshare.domain.service import (
    ImageProcessor,
    NotificationSender,
    SessionService,
)
from photoshare.domain.value import EventType
from photoshare.interface.api.app import create_app
from tests.conftest import make_photo, make_user, signup
from tests.di import BrokenValidatorsProvider, build_test_container


@pytest.fixture
def container():
    """All-mock container shared by the app and the test."""
    container = build_test_container()
    yield container
    asyncio.run(container.close())


@pytest.fixture
def client(container):
    """Create test client."""
    return TestClient(create_app(container))


def resolve(container, dependency):
    """Fetch an app-scoped dependency from a sync test."""
    return asyncio.run(container.get(dependency))


def upload(client, headers, png_bytes, title="T", taglist="a b"):
    return client.post(
        "/photos",
        data={"title": title, "taglist": taglist},
        files={"photo": ("photo.png", png_bytes, "image/png")},
        headers=headers,
    )


class TestUpload:
    """POST /photos."""

    def test_upload_then_get_returns_title_and_tags(self, client, png_bytes):
        alice = signup(client, "alice")

        response = upload(client, alice, png_bytes, title="T", taglist="a b")

        assert response.status_code == 200
        photo_id = response.json()["id"]

        detail = client.get(f"/photos/{photo_id}", headers=alice)
        assert detail.status_code == 200
        data = detail.json()
        assert data["title"] == "T"
        assert data["tags"] == ["a", "b"]
        assert data["owner_name"] == "alice"
        assert data["perms"] == {"edit": True, "delete": True, "vote": False}

    def test_requires_authentication(self, client, container, png_bytes):
        response = upload(client, {}, png_bytes)

        assert response.status_code == 401
        assert resolve(container, ImageProcessor).calls == []

    def test_disallowed_content_type_is_rejected_before_processing(
        self, client, container, png_bytes
    ):
        alice = signup(client, "alice")

        response = client.post(
            "/photos",
            data={"title": "T", "taglist": "a"},
            files={"photo": ("photo.gif", png_bytes, "image/gif")},
            headers=alice,
        )

        assert response.status_code == 400
        assert response.json() == {
            "errors": {"photo": "No image was posted"},
            "ok": False,
        }
        assert resolve(container, ImageProcessor).calls == []

    def test_missing_file_or_non_multipart_body(self, client, container):
        alice = signup(client, "alice")

        no_file = client.post("/photos", data={"title": "T"}, headers=alice)
        as_json = client.post("/photos", json={"title": "T"}, headers=alice)

        assert no_file.status_code == 400
        assert as_json.status_code == 400
        assert as_json.json()["errors"] == {"photo": "No image was posted"}
        assert resolve(container, ImageProcessor).calls == []

    def test_photo_sent_as_text_field_is_no_image(self, client, container):
        alice = signup(client, "alice")
        data = {"title": "T", "taglist": "a", "photo": "not-a-file"}

        response = client.post("/photos", data=data, headers=alice)
        anonymous = client.post("/photos", data=data)

        assert response.status_code == 400
        assert response.json()["errors"] == {"photo": "No image was posted"}
        assert anonymous.status_code == 401
        assert resolve(container, ImageProcessor).calls == []

    def test_invalid_photo_returns_field_errors(self, client, png_bytes):
        alice = signup(client, "alice")

        response = upload(client, alice, png_bytes, title="", taglist="")

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"title", "tags"}

    def test_processor_failure_is_500(self, client, container, png_bytes):
        alice = signup(client, "alice")
        resolve(container, ImageProcessor).fail = True

        response = upload(client, alice, png_bytes)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestRetrieval:
    """GET /photos, /photos/search, /photos/owner/{id} and /photos/{id}."""

    def test_unknown_or_malformed_photo_is_404(self, client):
        assert client.get(f"/photos/{uuid4()}").status_code == 404
        assert client.get("/photos/not-a-uuid").status_code == 404

    def test_anonymous_detail_has_no_permissions(self, client, png_bytes):
        alice = signup(client, "alice")
        photo_id = upload(client, alice, png_bytes).json()["id"]

        data = client.get(f"/photos/{photo_id}").json()

        assert data["perms"] == {"edit": False, "delete": False, "vote": False}

    def test_list_pages_and_ordering(self, client, png_bytes):
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        first = upload(client, alice, png_bytes, title="first").json()["id"]
        upload(client, alice, png_bytes, title="second")
        client.post(f"/photos/{first}/vote-up", headers=bob)

        newest = client.get("/photos").json()
        by_votes = client.get("/photos", params={"orderBy": "votes"}).json()
        lenient = client.get("/photos", params={"page": "abc"}).json()

        assert [p["title"] for p in newest["photos"]] == ["second", "first"]
        assert [p["title"] for p in by_votes["photos"]] == ["first", "second"]
        assert newest["total"] == 2
        assert newest["num_pages"] == 1
        assert lenient["current_page"] == 1

    def test_search(self, client, png_bytes):
        alice = signup(client, "alice")
        upload(client, alice, png_bytes, title="Golden Gate", taglist="sunset sf")
        upload(client, alice, png_bytes, title="Subway", taglist="nyc")

        by_tag = client.get("/photos/search", params={"q": "#sunset"}).json()
        by_word = client.get("/photos/search", params={"q": "subway"}).json()
        both = client.get("/photos/search", params={"q": "#nyc golden"}).json()
        empty = client.get("/photos/search", params={"q": ""}).json()

        assert [p["title"] for p in by_tag["photos"]] == ["Golden Gate"]
        assert [p["title"] for p in by_word["photos"]] == ["Subway"]
        assert both["total"] == 0
        assert empty == {"photos": [], "total": 0, "current_page": 1, "num_pages": 0}

    def test_owner_listing(self, client, png_bytes):
        alice = signup(client, "alice")
        owner_id = upload(client, alice, png_bytes).json()["owner_id"]

        mine = client.get(f"/photos/owner/{owner_id}")
        unknown = client.get(f"/photos/owner/{uuid4()}")
        malformed = client.get("/photos/owner/not-a-uuid")

        assert mine.json()["total"] == 1
        assert unknown.status_code == 200
        assert unknown.json()["total"] == 0
        assert malformed.status_code == 404


class TestMutations:
    """PUT title/tags, DELETE and notifications."""

    def test_edit_title_and_tags(self, client, container, png_bytes):
        alice = signup(client, "alice")
        photo_id = upload(client, alice, png_bytes).json()["id"]

        title = client.put(
            f"/photos/{photo_id}/title", json={"title": "Renamed"}, headers=alice
        )
        tags = client.put(
            f"/photos/{photo_id}/tags", json={"tags": ["#Beach", "sea"]}, headers=alice
        )

        assert title.status_code == 200
        assert tags.status_code == 200
        detail = client.get(f"/photos/{photo_id}").json()
        assert detail["title"] == "Renamed"
        assert detail["tags"] == ["beach", "sea"]

        messages = resolve(container, NotificationSender).messages
        assert [m.type for m in messages] == [
            EventType.PHOTO_UPLOADED,
            EventType.PHOTO_UPDATED,
            EventType.PHOTO_UPDATED,
        ]
        assert {m.sender for m in messages} == {"alice"}

    def test_edit_by_other_user_is_403_and_unchanged(self, client, png_bytes):
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        photo_id = upload(client, alice, png_bytes, title="Mine").json()["id"]

        response = client.put(
            f"/photos/{photo_id}/title", json={"title": "Stolen"}, headers=bob
        )

        assert response.status_code == 403
        assert client.get(f"/photos/{photo_id}").json()["title"] == "Mine"

    def test_repeated_malformed_edit_is_always_400(self, client, container, png_bytes):
        alice = signup(client, "alice")
        photo_id = upload(client, alice, png_bytes, title="Mine").json()["id"]

        for _ in range(3):
            response = client.put(
                f"/photos/{photo_id}/title",
                content=b"{broken",
                headers={**alice, "Content-Type": "application/json"},
            )
            assert response.status_code == 400

        assert client.get(f"/photos/{photo_id}").json()["title"] == "Mine"
        messages = resolve(container, NotificationSender).messages
        assert [m.type for m in messages] == [EventType.PHOTO_UPLOADED]

    def test_blank_title_returns_field_errors(self, client, png_bytes):
        alice = signup(client, "alice")
        photo_id = upload(client, alice, png_bytes).json()["id"]

        response = client.put(
            f"/photos/{photo_id}/title", json={"title": " "}, headers=alice
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {"title": "Title is missing"}

    def test_mutations_require_authentication(self, client, png_bytes):
        alice = signup(client, "alice")
        photo_id = upload(client, alice, png_bytes).json()["id"]

        assert client.delete(f"/photos/{photo_id}").status_code == 401
        assert (
            client.put(f"/photos/{photo_id}/title", json={"title": "x"}).status_code
            == 401
        )
        assert (
            client.put(f"/photos/{photo_id}/tags", json={"tags": ["x"]}).status_code
            == 401
        )
        assert client.post(f"/photos/{photo_id}/vote-up").status_code == 401

    def test_delete(self, client, container, png_bytes):
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        photo_id = upload(client, alice, png_bytes).json()["id"]

        denied = client.delete(f"/photos/{photo_id}", headers=bob)
        deleted = client.delete(f"/photos/{photo_id}", headers=alice)
        again = client.delete(f"/photos/{photo_id}", headers=alice)

        assert denied.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json() == {"success": True}
        assert again.status_code == 404
        assert client.get(f"/photos/{photo_id}").status_code == 404

        messages = resolve(container, NotificationSender).messages
        assert messages[-1].type == EventType.PHOTO_DELETED
        assert str(messages[-1].photo_id) == photo_id

    def test_delete_unknown_photo_is_404(self, client):
        alice = signup(client, "alice")

        assert client.delete(f"/photos/{uuid4()}", headers=alice).status_code == 404


class TestVotes:
    """POST /photos/{id}/vote-up and /vote-down."""

    def test_vote_once(self, client, container, png_bytes):
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        photo_id = upload(client, alice, png_bytes).json()["id"]

        first = client.post(f"/photos/{photo_id}/vote-down", headers=bob)
        second = client.post(f"/photos/{photo_id}/vote-up", headers=bob)
        own = client.post(f"/photos/{photo_id}/vote-up", headers=alice)

        assert first.status_code == 200
        assert first.json() == {"photo_id": photo_id, "up_votes": 0, "down_votes": 1}
        assert second.status_code == 403
        assert own.status_code == 403

        bob_detail = client.get(f"/photos/{photo_id}", headers=bob).json()
        assert bob_detail["perms"]["vote"] is False
        assert bob_detail["score"] == -1

        messages = resolve(container, NotificationSender).messages
        assert [m.type for m in messages] == [EventType.PHOTO_UPLOADED]

    def test_vote_on_unknown_photo_is_404(self, client):
        bob = signup(client, "bob")

        assert client.post(f"/photos/{uuid4()}/vote-up", headers=bob).status_code == 404


class TestTags:
    """GET /tags."""

    def test_tag_counts(self, client, png_bytes):
        alice = signup(client, "alice")
        upload(client, alice, png_bytes, taglist="sunset beach")
        upload(client, alice, png_bytes, taglist="sunset")

        response = client.get("/tags")

        assert response.status_code == 200
        assert response.json() == [
            {"tag": "sunset", "count": 2},
            {"tag": "beach", "count": 1},
        ]


class TestValidatorFailure:
    """A validator that raises is a 500, never a 400."""

    @pytest.fixture
    def container(self):
        container = build_test_container(overrides=[BrokenValidatorsProvider()])
        yield container
        asyncio.run(container.close())

    @pytest.fixture
    def alice(self, container):
        """Seed a user directly; signup itself needs the user validator."""
        user = make_user("alice")
        asyncio.run(resolve(container, UserRepository).save(user))
        token = resolve(container, SessionService).create_token(user)
        return user, {"X-Auth-Token": token}

    def test_upload(self, client, container, alice, png_bytes):
        _, headers = alice

        response = upload(client, headers, png_bytes)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert asyncio.run(resolve(container, PhotoRepository).count()) == 0

    def test_edit_title(self, client, container, alice):
        user, headers = alice
        photos = resolve(container, PhotoRepository)
        photo = asyncio.run(photos.save(make_photo(user, title="Original")))

        response = client.put(
            f"/photos/{photo.id}/title", json={"title": "Renamed"}, headers=headers
        )

        assert response.status_code == 500
        assert asyncio.run(photos.find_by_id(photo.id)).title == "Original"
        assert resolve(container, NotificationSender).messages == []

    def test_signup(self, client):
        response = client.post(
            "/signup",
            data={"name": "bob", "email": "bob@example.com", "password": "pw"},
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
