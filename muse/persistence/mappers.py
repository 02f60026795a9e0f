"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict
from uuid import UUID

from muse.domain.model import Theme, User, UserPatch, UserTheme
from muse.domain.value import Email, ThemeId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        password_hash=row.get("password_hash"),
        federated_id=row.get("federated_id"),
        theme_defined=row["theme_defined"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def patch_to_dict(patch: UserPatch) -> Dict[str, Any]:
    """Convert the set fields of a UserPatch to column values."""
    values = patch.changes()
    if "email" in values:
        values["email"] = values["email"].root
    return values


def row_to_theme(row: Dict[str, Any]) -> Theme:
    """Convert database row to Theme domain model."""
    return Theme(id=ThemeId(_uuid(row["id"])), name=row["name"])


def user_theme_to_dict(user_theme: UserTheme) -> Dict[str, Any]:
    """Convert UserTheme domain model to database dict (``seq`` is generated)."""
    return user_theme.model_dump()
