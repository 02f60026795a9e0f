"""Test harness for unit and integration tests.

Unit tests run against in-memory persistence and a recording email sender.
Integration tests unmock persistence and need a PostgreSQL database.
Settings are loaded from environment variables (see tests/conftest.py).
"""

import pytest_asyncio

from muse.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_user(unit_env):
            user_service = await unit_env.get(UserService)
            user = await user_service.create(Email("ada@example.com"), password_hash="...")
            assert user.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def bearer(token: str) -> dict[str, str]:
    """Authorization header carrying ``token``."""
    return {"Authorization": f"Bearer {token}"}
