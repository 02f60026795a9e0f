"""Theme preference use cases."""

from .get_theme_catalog import GetThemeCatalogResponse, GetThemeCatalogUseCase, ThemeItem
from .get_user_theme_selections import (
    GetUserThemeSelectionsRequest,
    GetUserThemeSelectionsResponse,
    GetUserThemeSelectionsUseCase,
)
from .save_theme_selections import (
    SaveThemeSelectionsRequest,
    SaveThemeSelectionsResponse,
    SaveThemeSelectionsUseCase,
    UserThemeItem,
)

__all__ = [
    "GetThemeCatalogResponse",
    "GetThemeCatalogUseCase",
    "GetUserThemeSelectionsRequest",
    "GetUserThemeSelectionsResponse",
    "GetUserThemeSelectionsUseCase",
    "SaveThemeSelectionsRequest",
    "SaveThemeSelectionsResponse",
    "SaveThemeSelectionsUseCase",
    "ThemeItem",
    "UserThemeItem",
]
