"""Get theme catalog use case."""

import logfire
from pydantic import BaseModel

from muse.domain.service import ThemeService


class ThemeItem(BaseModel):
    """Theme item in response."""

    id: str
    name: str


class GetThemeCatalogResponse(BaseModel):
    """Get theme catalog response."""

    themes: list[ThemeItem]


class GetThemeCatalogUseCase:
    """Use case for listing the selectable themes."""

    def __init__(self, theme_service: ThemeService) -> None:
        """Initialize get theme catalog use case.

        Args:
            theme_service: Theme domain service
        """
        self.theme_service = theme_service

    async def execute(self) -> GetThemeCatalogResponse:
        """Execute get theme catalog flow.

        Returns:
            Every catalog entry, ordered by name
        """
        with logfire.span("get_theme_catalog.execute"):
            themes = await self.theme_service.get_catalog()
            return GetThemeCatalogResponse(
                themes=[ThemeItem(id=str(theme.id), name=theme.name) for theme in themes]
            )
