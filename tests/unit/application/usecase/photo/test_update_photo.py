"""Unit tests for UpdateTitleUseCase and UpdateTagsUseCase."""

import pytest
from pydantic import ValidationError

from photoshare.application.usecase.photo import (
    UpdatePhotoRequest,
    UpdateTagsUseCase,
    UpdateTitleUseCase,
)
from photoshare.domain.error import (
    NotFoundError,
    PermissionDeniedError,
    ValidationFailedError,
)
from photoshare.domain.repository import PhotoRepository, UserRepository
from photoshare.domain.service import NotificationSender
from photoshare.domain.value import EventType
from tests.conftest import make_photo, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env, **photo_kwargs):
    users = await unit_env.get(UserRepository)
    photos = await unit_env.get(PhotoRepository)
    owner = await users.save(make_user("owner"))
    other = await users.save(make_user("other"))
    admin = await users.save(make_user("admin", is_admin=True))
    photo = await photos.save(make_photo(owner, title="Original", **photo_kwargs))
    return owner, other, admin, photo


def _request(photo, user, body: bytes) -> UpdatePhotoRequest:
    return UpdatePhotoRequest(photo_id=str(photo.id), user_id=str(user.id), body=body)


class TestUpdateTitleUseCase:
    """Tests for UpdateTitleUseCase."""

    @pytest.mark.asyncio
    async def test_owner_updates_title_and_broadcasts(self, unit_env):
        owner, _, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTitleUseCase)
        sender = await unit_env.get(NotificationSender)

        updated = await use_case.execute(
            _request(photo, owner, b'{"title": "  New title  "}')
        )

        assert updated.title == "New title"
        assert [(m.type, m.sender, m.photo_id) for m in sender.messages] == [
            (EventType.PHOTO_UPDATED, "owner", photo.id)
        ]

    @pytest.mark.asyncio
    async def test_admin_may_update_any_title(self, unit_env):
        _, _, admin, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTitleUseCase)

        updated = await use_case.execute(_request(photo, admin, b'{"title": "Mod"}'))

        assert updated.title == "Mod"

    @pytest.mark.asyncio
    async def test_other_user_is_denied_and_photo_unchanged(self, unit_env):
        _, other, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTitleUseCase)
        sender = await unit_env.get(NotificationSender)

        with pytest.raises(PermissionDeniedError):
            await use_case.execute(_request(photo, other, b'{"title": "Hijacked"}'))

        stored = await (await unit_env.get(PhotoRepository)).find_by_id(photo.id)
        assert stored.title == "Original"
        assert sender.messages == []

    @pytest.mark.asyncio
    async def test_permission_is_checked_before_body(self, unit_env):
        _, other, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTitleUseCase)

        with pytest.raises(PermissionDeniedError):
            await use_case.execute(_request(photo, other, b"{not json"))

    @pytest.mark.asyncio
    async def test_repeated_malformed_body_never_mutates(self, unit_env):
        owner, _, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTitleUseCase)
        photos = await unit_env.get(PhotoRepository)

        for body in (b"{not json", b'{"name": "x"}', b"", b'{"title": 5}'):
            with pytest.raises(ValidationError):
                await use_case.execute(_request(photo, owner, body))

        assert (await photos.find_by_id(photo.id)).title == "Original"

    @pytest.mark.asyncio
    async def test_blank_title_fails_validation(self, unit_env):
        owner, _, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTitleUseCase)

        with pytest.raises(ValidationFailedError) as exc_info:
            await use_case.execute(_request(photo, owner, b'{"title": "   "}'))

        assert exc_info.value.result.errors == {"title": "Title is missing"}

    @pytest.mark.asyncio
    async def test_unknown_and_malformed_photo_ids(self, unit_env):
        owner, _, _, _ = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTitleUseCase)

        for photo_id in ("not-a-uuid", "00000000-0000-0000-0000-000000000000"):
            with pytest.raises(NotFoundError):
                await use_case.execute(
                    UpdatePhotoRequest(
                        photo_id=photo_id, user_id=str(owner.id), body=b'{"title": "x"}'
                    )
                )

    @pytest.mark.asyncio
    async def test_votes_survive_title_change(self, unit_env):
        owner, _, _, photo = await _seed(unit_env, up_votes=4)
        use_case = await unit_env.get(UpdateTitleUseCase)

        updated = await use_case.execute(_request(photo, owner, b'{"title": "New"}'))

        assert updated.up_votes == 4


class TestUpdateTagsUseCase:
    """Tests for UpdateTagsUseCase."""

    @pytest.mark.asyncio
    async def test_tags_are_normalized_and_broadcast(self, unit_env):
        owner, _, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTagsUseCase)
        sender = await unit_env.get(NotificationSender)

        updated = await use_case.execute(
            _request(photo, owner, b'{"tags": ["#NYC", " street ", "nyc", ""]}')
        )

        assert updated.tags == ["nyc", "street"]
        assert [m.type for m in sender.messages] == [EventType.PHOTO_UPDATED]

    @pytest.mark.asyncio
    async def test_other_user_is_denied(self, unit_env):
        _, other, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTagsUseCase)

        with pytest.raises(PermissionDeniedError):
            await use_case.execute(_request(photo, other, b'{"tags": ["mine"]}'))

        stored = await (await unit_env.get(PhotoRepository)).find_by_id(photo.id)
        assert stored.tag_names == ["sunset"]

    @pytest.mark.asyncio
    async def test_malformed_body(self, unit_env):
        owner, _, _, photo = await _seed(unit_env)
        use_case = await unit_env.get(UpdateTagsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(_request(photo, owner, b'{"tags": "sunset"}'))
