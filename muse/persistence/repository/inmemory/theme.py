"""In-memory implementation of Theme repository for testing."""

from uuid import uuid4

from muse.domain.model.theme import Theme, UserTheme
from muse.domain.repository.theme import ThemeRepository
from muse.domain.value import ThemeId, UserId, UserThemeId

from .database import InMemoryDatabase


class InMemoryThemeRepository(ThemeRepository):
    """In-memory implementation of ThemeRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_all(self) -> list[Theme]:
        """Return the whole theme catalog, ordered by name."""
        return sorted(self._db.themes.values(), key=lambda t: t.name)

    async def find_theme_ids_by_user(self, user_id: UserId) -> list[ThemeId]:
        """Return a user's selected theme ids in insertion order."""
        return [ut.theme_id for ut in self._db.user_themes if ut.user_id == user_id]

    async def find_by_ids(self, theme_ids: list[ThemeId]) -> list[Theme]:
        """Return catalog entries for the given ids."""
        return [self._db.themes[t] for t in theme_ids if t in self._db.themes]

    async def insert_user_themes(
        self, user_id: UserId, theme_ids: list[ThemeId]
    ) -> list[UserTheme]:
        """Bulk insert user theme associations."""
        created = [
            UserTheme(id=UserThemeId(uuid4()), user_id=user_id, theme_id=theme_id)
            for theme_id in theme_ids
        ]
        self._db.user_themes.extend(created)
        return created
