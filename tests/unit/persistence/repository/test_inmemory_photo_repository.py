"""Unit tests for InMemoryPhotoRepository ordering and search."""

import pytest
import pytest_asyncio

from photoshare.domain.value import PhotoSortOrder, SearchTerms, VoteDirection
from photoshare.persistence.repository.inmemory import InMemoryPhotoRepository
from tests.conftest import make_photo, make_user


@pytest.fixture
def owner():
    return make_user("owner")


class TestSorting:
    """Tests for find_all() ordering."""

    @pytest.mark.asyncio
    async def test_created_sort_is_newest_first(self, owner):
        repo = InMemoryPhotoRepository()
        await repo.save(make_photo(owner, title="old", age_minutes=10))
        await repo.save(make_photo(owner, title="new", age_minutes=0))
        await repo.save(make_photo(owner, title="mid", age_minutes=5))

        photos = await repo.find_all(sort=PhotoSortOrder.CREATED)

        assert [p.title for p in photos] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_votes_sort_by_score_then_newest(self, owner):
        repo = InMemoryPhotoRepository()
        await repo.save(
            make_photo(owner, title="popular-old", up_votes=3, age_minutes=30)
        )
        await repo.save(make_photo(owner, title="tied-old", up_votes=1, age_minutes=20))
        await repo.save(make_photo(owner, title="tied-new", up_votes=2, down_votes=1))
        await repo.save(
            make_photo(owner, title="disliked", down_votes=2, age_minutes=1)
        )

        photos = await repo.find_all(sort=PhotoSortOrder.VOTES)

        assert [p.title for p in photos] == [
            "popular-old",
            "tied-new",
            "tied-old",
            "disliked",
        ]


class TestSearch:
    """Tests for search() and count_search()."""

    @pytest_asyncio.fixture
    async def repo(self, owner):
        repo = InMemoryPhotoRepository()
        await repo.save(
            make_photo(
                owner, title="Golden Gate at dusk", tags=["sunset", "sf"], age_minutes=3
            )
        )
        await repo.save(
            make_photo(
                owner, title="Beach day", tags=["sunset", "beach"], age_minutes=2
            )
        )
        await repo.save(
            make_photo(
                owner, title="Subway rush", tags=["nyc", "street"], age_minutes=1
            )
        )
        return repo

    @pytest.mark.asyncio
    async def test_hash_term_matches_tag_exactly(self, repo):
        photos = await repo.search(SearchTerms.parse("#sunset"))

        assert [p.title for p in photos] == ["Beach day", "Golden Gate at dusk"]

    @pytest.mark.asyncio
    async def test_hash_term_does_not_match_title(self, repo):
        assert await repo.search(SearchTerms.parse("#golden")) == []

    @pytest.mark.asyncio
    async def test_word_matches_title_substring_ignoring_case(self, repo):
        photos = await repo.search(SearchTerms.parse("GOLD"))

        assert [p.title for p in photos] == ["Golden Gate at dusk"]

    @pytest.mark.asyncio
    async def test_word_matches_exact_tag(self, repo):
        photos = await repo.search(SearchTerms.parse("street"))

        assert [p.title for p in photos] == ["Subway rush"]

    @pytest.mark.asyncio
    async def test_every_term_must_match(self, repo):
        terms = SearchTerms.parse("#sunset beach")

        assert [p.title for p in await repo.search(terms)] == ["Beach day"]
        assert await repo.count_search(terms) == 1


class TestVotesAndTags:
    """Tests for increment_votes(), save() and tag_counts()."""

    @pytest.mark.asyncio
    async def test_resave_keeps_vote_counts(self, owner):
        repo = InMemoryPhotoRepository()
        photo = await repo.save(make_photo(owner))
        await repo.increment_votes(photo.id, VoteDirection.UP)

        resaved = await repo.save(photo.model_copy(update={"title": "Renamed"}))

        stored = await repo.find_by_id(photo.id)
        assert stored.title == "Renamed"
        assert stored.up_votes == 1
        assert resaved.up_votes == 1

    @pytest.mark.asyncio
    async def test_tag_counts_by_count_then_name(self, owner):
        repo = InMemoryPhotoRepository()
        await repo.save(make_photo(owner, tags=["sunset", "beach"]))
        await repo.save(make_photo(owner, tags=["sunset", "art"]))
        await repo.save(make_photo(owner, tags=["zoo"]))

        counts = await repo.tag_counts()

        assert [(c.tag, c.count) for c in counts] == [
            ("sunset", 2),
            ("art", 1),
            ("beach", 1),
            ("zoo", 1),
        ]
