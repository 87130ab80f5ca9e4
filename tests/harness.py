"""Test harness for integration and E2E tests.

Settings are loaded from environment variables (tests/conftest.py sets defaults).
Integration tests assume postgres is reachable at DATABASE__URL.
"""

import pytest_asyncio

from homie.config import Settings
from homie.util.di import Component
from tests.di import build_test_container


def create_env_fixture(
    unmock: set[Component] | None = None, settings: Settings | None = None
):
    """Factory for request-scoped container fixtures.

    Each test gets a fresh container, so mock state never carries over.

    Args:
        unmock: Components to use real implementations for
        settings: Settings overriding the environment defaults

    Usage:
        # Unit tests - everything mocked, no docker needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_list(integration_env):
            repo = await integration_env.get(CuratedListRepository)
            saved = await repo.save(CuratedList(fid=Fid(1), list_name="reads"))
            assert saved.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock, settings=settings)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _test_environment
