"""Unit tests for domain models."""

from uuid import uuid4

from photoshare.domain.model import ValidationResult
from photoshare.domain.value import PhotoId, VoteDirection
from tests.conftest import make_photo, make_user


class TestPhoto:
    """Tests for the Photo aggregate."""

    def test_score_is_up_minus_down(self):
        photo = make_photo(make_user(), up_votes=5, down_votes=2)

        assert photo.score == 3

    def test_with_vote_returns_updated_copy(self):
        photo = make_photo(make_user())

        up = photo.with_vote(VoteDirection.UP)
        down = up.with_vote(VoteDirection.DOWN)

        assert (photo.up_votes, photo.down_votes) == (0, 0)
        assert (up.up_votes, up.down_votes) == (1, 0)
        assert (down.up_votes, down.down_votes) == (1, 1)


class TestUser:
    """Tests for the User aggregate."""

    def test_register_vote_is_idempotent(self):
        user = make_user()
        photo_id = PhotoId(uuid4())

        once = user.register_vote(photo_id)
        twice = once.register_vote(photo_id)

        assert not user.has_voted(photo_id)
        assert once.has_voted(photo_id)
        assert twice.votes == [photo_id]


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_ok_without_errors(self):
        assert ValidationResult().ok

    def test_serializes_errors_and_ok(self):
        result = ValidationResult(errors={"title": "Title is missing"})

        assert result.model_dump() == {
            "errors": {"title": "Title is missing"},
            "ok": False,
        }
