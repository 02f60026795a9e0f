"""Domain value objects for Muse."""

from muse.domain.value.identifiers import ThemeId, UserId, UserThemeId
from muse.domain.value.types import (
    Email,
    RecoveryClaims,
    SessionClaims,
    TokenPurpose,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThemeId",
    "UserThemeId",
    # Types
    "Email",
    "TokenPurpose",
    "SessionClaims",
    "RecoveryClaims",
]
