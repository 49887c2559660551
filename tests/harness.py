"""Test harness for unit, API and integration tests.

Integration tests assume Postgres and Redis are already running
(``docker compose up``) and configured through environment variables.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from board.interface.api.app import create_app
from board.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for container fixtures.

    The fixture yields a request-scoped container; everything resolved
    from it shares one in-memory database and cache.

    Args:
        unmock: Components to use real implementations for

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_comment(unit_env):
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


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for ``TestClient`` fixtures over an app on the test container.

    Each request gets its own request scope, while the in-memory database
    and cache persist for the whole test.
    """

    @pytest.fixture
    def _client():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)
        with TestClient(app) as client:
            yield client

    return _client
