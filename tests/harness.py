"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
Integration tests assume a migrated PostgreSQL database is already running.
"""

import pytest_asyncio

from qna.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh container and yields its
    request-scoped child, so every test starts from an empty store.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_ask(unit_env):
            service = await unit_env.get(QuestionService)
            question = await service.create_question(...)
            assert question.views == 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
