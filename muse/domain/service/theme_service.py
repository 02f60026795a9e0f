"""Theme preference domain service."""

import logfire

from muse.domain.error import InvalidThemeSelectionError, ValidationError
from muse.domain.model.theme import Theme, UserTheme
from muse.domain.model.user import UserPatch
from muse.domain.repository.theme import ThemeRepository
from muse.domain.repository.user import UserRepository
from muse.domain.value import ThemeId, UserId

from .base import Service


class ThemeService(Service):
    """Validates and persists a user's theme selections."""

    def __init__(
        self, theme_repository: ThemeRepository, user_repository: UserRepository
    ) -> None:
        """Initialize theme service.

        Args:
            theme_repository: Theme catalog and association repository
            user_repository: User repository, for the ``theme_defined`` flag
        """
        self.theme_repository = theme_repository
        self.user_repository = user_repository

    async def get_catalog(self) -> list[Theme]:
        """Return every theme a user may select."""
        with logfire.span("theme_service.get_catalog"):
            themes = await self.theme_repository.find_all()
            logfire.info("Theme catalog retrieved", count=len(themes))
            return themes

    async def save_selections(
        self, user_id: UserId, theme_ids: list[ThemeId]
    ) -> list[UserTheme]:
        """Validate ``theme_ids`` against the catalog and store them.

        Nothing is written unless every id is in the catalog. Selecting an
        already selected theme again is accepted and stored again.

        Args:
            user_id: Owner of the selections
            theme_ids: Selected catalog ids

        Returns:
            The created associations

        Raises:
            ValidationError: If no theme is selected
            InvalidThemeSelectionError: Listing every id missing from the catalog
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "theme_service.save_selections",
            user_id=str(user_id),
            count=len(theme_ids),
        ):
            if not theme_ids:
                raise ValidationError("Select at least one theme.")

            catalog_ids = {theme.id for theme in await self.theme_repository.find_all()}
            invalid = [theme_id for theme_id in theme_ids if theme_id not in catalog_ids]
            if invalid:
                logfire.warn(
                    "Theme selection rejected",
                    user_id=str(user_id),
                    invalid_ids=[str(theme_id) for theme_id in invalid],
                )
                raise InvalidThemeSelectionError(invalid)

            # Raises NotFoundError before anything is inserted for an unknown user
            await self.user_repository.update(user_id, UserPatch(theme_defined=True))
            created = await self.theme_repository.insert_user_themes(user_id, theme_ids)

            logfire.info("Theme selections saved", user_id=str(user_id), count=len(created))
            return created

    async def get_selection_names(self, user_id: UserId) -> list[str]:
        """Return the names of a user's selected themes, in selection order.

        Args:
            user_id: Owner of the selections

        Returns:
            Theme names; a theme selected twice appears twice
        """
        with logfire.span("theme_service.get_selection_names", user_id=str(user_id)):
            theme_ids = await self.theme_repository.find_theme_ids_by_user(user_id)
            themes = await self.theme_repository.find_by_ids(list(set(theme_ids)))
            names = {theme.id: theme.name for theme in themes}
            return [names[theme_id] for theme_id in theme_ids if theme_id in names]
