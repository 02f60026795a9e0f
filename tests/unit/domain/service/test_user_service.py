"""Unit tests for UserService."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from muse.domain.error import ConflictError, NotFoundError
from muse.domain.model.user import UserPatch
from muse.domain.service import UserService
from muse.domain.value import Email, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_create_local_user(self, unit_env):
        """Creating a user should store it with theme_defined false."""
        user_service = await unit_env.get(UserService)

        user = await user_service.create(Email("ada@example.com"), password_hash="digest")

        assert user.theme_defined is False
        assert user.has_password
        assert user.federated_id is None
        assert await user_service.get_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_create_requires_a_credential(self, unit_env):
        """A user with neither a password nor a federated id must not exist."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(PydanticValidationError):
            await user_service.create(Email("ada@example.com"))

        assert await user_service.get_by_email(Email("ada@example.com")) is None

    @pytest.mark.asyncio
    async def test_create_duplicate_email_conflicts(self, unit_env):
        """The store should reject a second user with the same email."""
        user_service = await unit_env.get(UserService)
        await user_service.create(Email("ada@example.com"), password_hash="digest")

        with pytest.raises(ConflictError):
            await user_service.create(Email("ADA@example.com"), federated_id="g-1")

    @pytest.mark.asyncio
    async def test_get_by_email_is_case_insensitive(self, unit_env):
        """Email lookups should ignore case and surrounding spaces."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create(Email("Ada@Example.com"), federated_id="g-1")

        found = await user_service.get_by_email(Email("  ada@EXAMPLE.com "))

        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        """A partial update should leave unspecified fields untouched."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create(Email("ada@example.com"), federated_id="g-1")

        updated = await user_service.update(user.id, UserPatch(password_hash="digest"))

        assert updated.password_hash == "digest"
        assert updated.federated_id == "g-1"
        assert updated.email == user.email
        assert updated.updated_at >= user.updated_at

    @pytest.mark.asyncio
    async def test_update_unknown_user_not_found(self, unit_env):
        """Updating a missing user should raise NotFoundError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.update(UserId(uuid4()), UserPatch(theme_defined=True))

    @pytest.mark.asyncio
    async def test_require_by_id(self, unit_env):
        """require_by_id should raise for a missing user."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found."):
            await user_service.require_by_id(UserId(uuid4()))
