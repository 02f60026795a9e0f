"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .theme import InMemoryThemeRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryThemeRepository",
    "InMemoryUserRepository",
]
