"""Test harness shared by unit, integration and e2e tests.

Integration tests expect a migrated PostgreSQL reachable through
DATABASE__URL; unit tests need nothing running.
"""

import pytest_asyncio

from topmeup.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh container (so in-memory stores start empty)
    and yields a request-scoped child container for resolving services.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_reply(unit_env):
            service = await unit_env.get(CommentService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
