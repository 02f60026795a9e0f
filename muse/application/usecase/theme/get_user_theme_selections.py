"""Get user theme selections use case."""

import logfire
from pydantic import BaseModel

from muse.domain.service import ThemeService
from muse.domain.value import UserId


class GetUserThemeSelectionsRequest(BaseModel):
    """Get user theme selections request."""

    user_id: UserId


class GetUserThemeSelectionsResponse(BaseModel):
    """Get user theme selections response."""

    names: list[str]  # In selection order, duplicates kept


class GetUserThemeSelectionsUseCase:
    """Use case for reading back a user's selected theme names."""

    def __init__(self, theme_service: ThemeService) -> None:
        self.theme_service = theme_service

    async def execute(
        self, request: GetUserThemeSelectionsRequest
    ) -> GetUserThemeSelectionsResponse:
        with logfire.span(
            "get_user_theme_selections.execute", user_id=str(request.user_id)
        ):
            names = await self.theme_service.get_selection_names(request.user_id)
            logfire.info("Theme selections listed", count=len(names))
            return GetUserThemeSelectionsResponse(names=names)
