"""User aggregate root.

A user signs in with a local password, a federated (Google) identity, or
both once the two have been merged on the same email.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from muse.domain.model.common import DomainModel
from muse.domain.value import Email, UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root.

    Invariant: at least one of ``password_hash`` and ``federated_id`` is set.
    """

    id: UserId
    email: Email
    password_hash: Optional[str] = None
    federated_id: Optional[str] = None  # Google subject id
    theme_defined: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def require_credential(self) -> "User":
        """Reject users that could never authenticate."""
        if not self.password_hash and not self.federated_id:
            raise ValueError("User must have a password or a federated identity")
        return self

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)


class UserPatch(BaseModel):
    """Partial update of a user; ``None`` fields are left unchanged."""

    email: Optional[Email] = None
    password_hash: Optional[str] = None
    federated_id: Optional[str] = None
    theme_defined: Optional[bool] = None

    def changes(self) -> dict:
        """Fields explicitly provided, as model values."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if getattr(self, name) is not None
        }
