"""Domain value objects for Muse.

Value objects are immutable and defined by their values, not identity.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from muse.domain.value.common import RootValueObject, ValueObject
from muse.domain.value.identifiers import UserId

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Email(RootValueObject[str]):
    """Email address, the case-insensitive key of a user account.

    Stored trimmed and lower-cased so that equality is case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Validate shape and normalize case."""
        v = v.strip().lower()
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v


class TokenPurpose(str, Enum):
    """What a bearer token may be used for."""

    SESSION = "session"
    RECOVERY = "recovery"


class SessionClaims(ValueObject):
    """Trusted claims of a verified session token."""

    id: UserId
    email: Email
    theme_defined: bool = Field(alias="themeDefined")
    issued_at: datetime
    expires_at: datetime


class RecoveryClaims(ValueObject):
    """Trusted claims of a verified recovery token.

    Only the email is trusted: the token proves control of the mailbox.
    """

    email: Email
    issued_at: datetime
    expires_at: datetime
