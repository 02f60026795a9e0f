"""Shared state for the in-memory repositories."""

from muse.domain.model import Theme, User, UserTheme
from muse.domain.value import ThemeId, UserId
from muse.persistence.seed import THEME_CATALOG


class InMemoryDatabase:
    """Tables backing the in-memory repositories.

    Repositories built on the same instance see each other's writes, the
    way repositories sharing a session do. The theme catalog is seeded.
    """

    def __init__(self, themes: list[Theme] | None = None) -> None:
        self.users: dict[UserId, User] = {}
        self.themes: dict[ThemeId, Theme] = {
            theme.id: theme for theme in (THEME_CATALOG if themes is None else themes)
        }
        self.user_themes: list[UserTheme] = []
