"""Theme repository interface."""

from abc import ABC, abstractmethod

from muse.domain.model.theme import Theme, UserTheme
from muse.domain.value import ThemeId, UserId


class ThemeRepository(ABC):
    """Repository for the theme catalog and user theme associations."""

    @abstractmethod
    async def find_all(self) -> list[Theme]:
        """Return the whole theme catalog."""
        pass

    @abstractmethod
    async def find_theme_ids_by_user(self, user_id: UserId) -> list[ThemeId]:
        """Return a user's selected theme ids in insertion order.

        Duplicated selections are returned once per stored association.
        """
        pass

    @abstractmethod
    async def find_by_ids(self, theme_ids: list[ThemeId]) -> list[Theme]:
        """Return catalog entries for the given ids (unknown ids are skipped)."""
        pass

    @abstractmethod
    async def insert_user_themes(
        self, user_id: UserId, theme_ids: list[ThemeId]
    ) -> list[UserTheme]:
        """Bulk insert user theme associations.

        Args:
            user_id: Owner of the selections
            theme_ids: Catalog ids, assumed already validated

        Returns:
            The created associations, in the order given
        """
        pass
