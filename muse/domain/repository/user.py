"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from muse.domain.model.user import User, UserPatch
from muse.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for the User aggregate.

    The store is the final authority on email uniqueness: ``create`` and
    ``update`` raise ``ConflictError`` when another user already owns the
    email, even if the caller checked beforehand.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email, case-insensitively.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The stored user

        Raises:
            ConflictError: If the email is already taken
        """
        pass

    @abstractmethod
    async def update(self, user_id: UserId, patch: UserPatch) -> User:
        """Apply a partial update to an existing user.

        Args:
            user_id: The user to update
            patch: Fields to change; unset fields are left alone

        Returns:
            The updated user

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email is owned by another user
        """
        pass
