"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from muse.domain.error import ConflictError, NotFoundError
from muse.domain.model import User, UserPatch
from muse.domain.repository import UserRepository
from muse.domain.value import Email, UserId
from muse.persistence.mappers import patch_to_dict, row_to_user, user_to_dict
from muse.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    The unique constraint on ``users.email`` is the authority on email
    uniqueness; its violations surface as ``ConflictError``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email; stored and queried addresses are both lower-cased."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            ConflictError: If the email is already taken
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn("User insert rejected by store", error=str(e.orig))
            raise ConflictError("Invalid Email.") from e

        return user

    async def update(self, user_id: UserId, patch: UserPatch) -> User:
        """Apply a partial update.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email is owned by another user
        """
        values = patch_to_dict(patch)
        values["updated_at"] = datetime.now(timezone.utc)

        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(**values)
            .returning(users_table)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except IntegrityError as e:
            logfire.warn("User update rejected by store", error=str(e.orig))
            raise ConflictError("Invalid email.") from e

        if not row:
            raise NotFoundError("User not found.")
        return row_to_user(dict(row))
