"""User use cases."""

from .summary import UserSummary
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = ["UpdateUserRequest", "UpdateUserUseCase", "UserSummary"]
