"""Test harness shared by unit, e2e and integration tests.

Integration tests expect PostgreSQL to be reachable at DATABASE__URL with
migrations applied (`python scripts/run_migrations.py`).
"""

import pytest_asyncio

from photoshare.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields a request-scoped container for service access
    - Closes both containers afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_photo(integration_env):
            repo = await integration_env.get(PhotoRepository)
            photo = await repo.save(Photo(...))
            assert photo.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
