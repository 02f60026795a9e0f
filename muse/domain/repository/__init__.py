"""Repository interfaces for Muse domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from muse.domain.repository.theme import ThemeRepository
from muse.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ThemeRepository",
]
