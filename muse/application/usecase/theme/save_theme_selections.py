"""Save theme selections use case."""

import logfire
from pydantic import BaseModel

from muse.domain.service import ThemeService
from muse.domain.value import ThemeId, UserId


class SaveThemeSelectionsRequest(BaseModel):
    """Save theme selections request."""

    user_id: UserId  # From the authenticated session
    theme_ids: list[ThemeId]


class UserThemeItem(BaseModel):
    """Stored selection in response."""

    id: str
    user_id: str
    theme_id: str


class SaveThemeSelectionsResponse(BaseModel):
    """Save theme selections response."""

    selections: list[UserThemeItem]


class SaveThemeSelectionsUseCase:
    """Use case for storing the themes a user picked."""

    def __init__(self, theme_service: ThemeService) -> None:
        """Initialize save theme selections use case.

        Args:
            theme_service: Theme domain service
        """
        self.theme_service = theme_service

    async def execute(
        self, request: SaveThemeSelectionsRequest
    ) -> SaveThemeSelectionsResponse:
        """Execute save theme selections flow.

        Raises:
            ValidationError: If no theme is selected
            InvalidThemeSelectionError: If any id is missing from the catalog
            NotFoundError: If the user no longer exists
        """
        with logfire.span(
            "save_theme_selections.execute", user_id=str(request.user_id)
        ):
            created = await self.theme_service.save_selections(
                request.user_id, request.theme_ids
            )
            return SaveThemeSelectionsResponse(
                selections=[
                    UserThemeItem(
                        id=str(selection.id),
                        user_id=str(selection.user_id),
                        theme_id=str(selection.theme_id),
                    )
                    for selection in created
                ]
            )
