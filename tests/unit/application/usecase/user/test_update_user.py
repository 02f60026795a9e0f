"""Unit tests for UpdateUserUseCase."""

from uuid import uuid4

import pytest

from muse.application.usecase.user import UpdateUserRequest, UpdateUserUseCase
from muse.domain.error import ConflictError, NotFoundError
from muse.domain.service import CredentialHasher, UserService
from muse.domain.value import Email, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase."""

    @pytest.mark.asyncio
    async def test_change_email_keeps_password(self, unit_env):
        """Changing only the email should leave the password untouched."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create(Email("ada@example.com"), password_hash="digest")
        use_case = await unit_env.get(UpdateUserUseCase)

        summary = await use_case.execute(
            UpdateUserRequest(user_id=user.id, email=Email("lovelace@example.com"))
        )

        assert summary.email == "lovelace@example.com"
        stored = await user_service.get_by_id(user.id)
        assert stored.password_hash == "digest"

    @pytest.mark.asyncio
    async def test_keeping_own_email_is_allowed(self, unit_env):
        """Submitting the user's current email should not conflict."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create(Email("ada@example.com"), password_hash="digest")
        use_case = await unit_env.get(UpdateUserUseCase)

        summary = await use_case.execute(
            UpdateUserRequest(user_id=user.id, email=Email("ADA@example.com"))
        )

        assert summary.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_password_merges_into_federated_account(self, unit_env, password):
        """Setting a password on a federated account should keep both credentials."""
        user_service = await unit_env.get(UserService)
        hasher = await unit_env.get(CredentialHasher)
        user = await user_service.create(Email("ada@example.com"), federated_id="g-1")
        use_case = await unit_env.get(UpdateUserUseCase)

        summary = await use_case.execute(
            UpdateUserRequest(
                user_id=user.id, email=Email("ada@example.com"), password=password
            )
        )

        assert summary.has_password is True
        assert summary.has_federated_identity is True
        stored = await user_service.get_by_id(user.id)
        assert await hasher.verify(password, stored.password_hash)

    @pytest.mark.asyncio
    async def test_email_of_other_user_conflicts(self, unit_env):
        """Taking another user's email should raise ConflictError."""
        user_service = await unit_env.get(UserService)
        await user_service.create(Email("taken@example.com"), password_hash="digest")
        user = await user_service.create(Email("ada@example.com"), password_hash="digest")
        use_case = await unit_env.get(UpdateUserUseCase)

        with pytest.raises(ConflictError, match="Invalid email."):
            await use_case.execute(
                UpdateUserRequest(user_id=user.id, email=Email("taken@example.com"))
            )

        assert (await user_service.get_by_id(user.id)).email == Email("ada@example.com")

    @pytest.mark.asyncio
    async def test_unknown_user_not_found(self, unit_env):
        """Updating a user that no longer exists should raise NotFoundError."""
        use_case = await unit_env.get(UpdateUserUseCase)

        with pytest.raises(NotFoundError, match="User not found."):
            await use_case.execute(
                UpdateUserRequest(user_id=UserId(uuid4()), email=Email("ada@example.com"))
            )
