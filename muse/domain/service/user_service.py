"""User domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from muse.domain.error import NotFoundError
from muse.domain.model.user import User, UserPatch
from muse.domain.repository.user import UserRepository
from muse.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user persistence operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def get_by_email(self, email: Email) -> User | None:
        """Get a user by email (case-insensitive).

        Args:
            email: Email address

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_email"):
            user = await self.user_repository.find_by_email(email)
            if user is None:
                logfire.info("User not found by email")
            return user

    async def create(
        self,
        email: Email,
        password_hash: str | None = None,
        federated_id: str | None = None,
    ) -> User:
        """Create a user with a local password, a federated identity or both.

        Args:
            email: Account email
            password_hash: Digest of the local password
            federated_id: External identity subject id

        Returns:
            The stored user

        Raises:
            ValueError: If neither credential is given
            ConflictError: If the store already holds the email
        """
        now = datetime.now(timezone.utc)
        user = User(
            id=UserId(uuid4()),
            email=email,
            password_hash=password_hash,
            federated_id=federated_id,
            theme_defined=False,
            created_at=now,
            updated_at=now,
        )

        with logfire.span(
            "user_service.create",
            user_id=str(user.id),
            federated=federated_id is not None,
        ):
            saved = await self.user_repository.create(user)
            logfire.info("User created", user_id=str(saved.id))
            return saved

    async def update(self, user_id: UserId, patch: UserPatch) -> User:
        """Apply a partial update.

        Args:
            user_id: User to update
            patch: Fields to change

        Returns:
            The updated user

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to someone else
        """
        with logfire.span(
            "user_service.update",
            user_id=str(user_id),
            fields=sorted(patch.changes()),
        ):
            user = await self.user_repository.update(user_id, patch)
            logfire.info("User updated", user_id=str(user_id))
            return user

    async def require_by_id(self, user_id: UserId) -> User:
        """Get a user by ID or raise.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user
