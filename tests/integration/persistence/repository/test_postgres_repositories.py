"""Integration tests for the PostgreSQL repositories.

These tests verify constraint handling and ordering against a real database.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from muse.domain.error import ConflictError, NotFoundError
from muse.domain.model import User, UserPatch
from muse.domain.repository import ThemeRepository, UserRepository
from muse.domain.value import Email, UserId
from muse.persistence.database import create_schema
from muse.persistence.seed import THEME_CATALOG
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def env(integration_env):
    """Request container over a database with the schema in place."""
    await create_schema(await integration_env.get(AsyncEngine))
    return integration_env


def new_user(**credentials) -> User:
    now = datetime.now(timezone.utc)
    return User(
        id=UserId(uuid4()),
        email=Email(f"user-{uuid4().hex[:12]}@example.com"),
        created_at=now,
        updated_at=now,
        **(credentials or {"password_hash": "digest"}),
    )


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, env):
        repo = await env.get(UserRepository)
        user = new_user(federated_id="g-1")

        await repo.create(user)

        by_id = await repo.find_by_id(user.id)
        by_email = await repo.find_by_email(Email(user.email.root.upper()))
        assert by_id == by_email
        assert by_id.federated_id == "g-1"
        assert by_id.password_hash is None
        assert by_id.theme_defined is False

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, env):
        """The unique constraint should surface as ConflictError."""
        repo = await env.get(UserRepository)
        user = new_user()
        await repo.create(user)
        duplicate = new_user(federated_id="g-2").model_copy(update={"email": user.email})

        with pytest.raises(ConflictError, match="Invalid Email."):
            await repo.create(duplicate)

        # The transaction survives the conflict
        assert await repo.find_by_id(user.id) is not None

    @pytest.mark.asyncio
    async def test_update_is_partial(self, env):
        repo = await env.get(UserRepository)
        user = new_user(federated_id="g-1")
        await repo.create(user)

        updated = await repo.update(user.id, UserPatch(password_hash="new-digest"))

        assert updated.password_hash == "new-digest"
        assert updated.federated_id == "g-1"
        assert updated.email == user.email

    @pytest.mark.asyncio
    async def test_update_to_taken_email_conflicts(self, env):
        repo = await env.get(UserRepository)
        first, second = new_user(), new_user()
        await repo.create(first)
        await repo.create(second)

        with pytest.raises(ConflictError, match="Invalid email."):
            await repo.update(second.id, UserPatch(email=first.email))

    @pytest.mark.asyncio
    async def test_update_missing_user(self, env):
        repo = await env.get(UserRepository)

        with pytest.raises(NotFoundError):
            await repo.update(UserId(uuid4()), UserPatch(theme_defined=True))


class TestPostgresThemeRepository:
    """Integration tests for PostgresThemeRepository."""

    @pytest.mark.asyncio
    async def test_catalog_is_seeded(self, env):
        repo = await env.get(ThemeRepository)

        names = [theme.name for theme in await repo.find_all()]

        assert set(theme.name for theme in THEME_CATALOG) <= set(names)
        assert names == sorted(names)

    @pytest.mark.asyncio
    async def test_selections_keep_order_and_duplicates(self, env):
        users = await env.get(UserRepository)
        repo = await env.get(ThemeRepository)
        user = new_user()
        await users.create(user)
        picks = [THEME_CATALOG[4].id, THEME_CATALOG[1].id, THEME_CATALOG[4].id]

        created = await repo.insert_user_themes(user.id, picks)

        assert [row.theme_id for row in created] == picks
        assert await repo.find_theme_ids_by_user(user.id) == picks
        found = await repo.find_by_ids(picks)
        assert {theme.id for theme in found} == set(picks)
