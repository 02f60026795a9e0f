"""Domain model entities for Muse."""

from muse.domain.model.theme import Theme, UserTheme
from muse.domain.model.user import User, UserPatch

__all__ = [
    "User",
    "UserPatch",
    "Theme",
    "UserTheme",
]
