"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from muse.domain.error import ConflictError, NotFoundError
from muse.domain.model.user import User, UserPatch
from muse.domain.repository.user import UserRepository
from muse.domain.value import Email, UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces email uniqueness like the database constraint does.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._db.users.values():
            if user.email == email:
                return user
        return None

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            ConflictError: If the email is already taken
        """
        if user.id in self._db.users or await self.find_by_email(user.email):
            raise ConflictError("Invalid Email.")
        self._db.users[user.id] = user
        return user

    async def update(self, user_id: UserId, patch: UserPatch) -> User:
        """Apply a partial update.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email is owned by another user
        """
        user = self._db.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found.")

        if patch.email is not None:
            owner = await self.find_by_email(patch.email)
            if owner is not None and owner.id != user_id:
                raise ConflictError("Invalid email.")

        updated = user.model_copy(
            update={**patch.changes(), "updated_at": datetime.now(timezone.utc)}
        )
        self._db.users[user_id] = updated
        return updated
