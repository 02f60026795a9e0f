"""PostgreSQL repository implementations."""

from muse.persistence.repository.theme import PostgresThemeRepository
from muse.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThemeRepository",
]
