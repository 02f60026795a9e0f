"""Theme catalog routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from muse.application.usecase.theme import GetThemeCatalogUseCase, ThemeItem
from muse.interface.api.schemas import Envelope

router = APIRouter(prefix="/themes", tags=["themes"], route_class=DishkaRoute)


@router.get("", response_model=Envelope[list[ThemeItem]])
async def list_themes(
    get_theme_catalog_use_case: FromDishka[GetThemeCatalogUseCase],
) -> Envelope[list[ThemeItem]]:
    """List every selectable theme.

    Example:
        GET /themes

        Response:
        {"data": [{"id": "0b6e...", "name": "Adventure"}, ...], "error": null}
    """
    result = await get_theme_catalog_use_case.execute()
    return Envelope(data=result.themes)
