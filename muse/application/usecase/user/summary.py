"""User summary returned by account use cases."""

from datetime import datetime

from pydantic import BaseModel

from muse.domain.model.user import User


class UserSummary(BaseModel):
    """Public view of a user; never includes credential material."""

    id: str
    email: str
    theme_defined: bool
    has_password: bool
    has_federated_identity: bool
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            email=user.email.root,
            theme_defined=user.theme_defined,
            has_password=user.has_password,
            has_federated_identity=user.federated_id is not None,
            updated_at=user.updated_at,
        )
