"""User account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from muse.application.usecase.auth import (
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
)
from muse.application.usecase.theme import (
    GetUserThemeSelectionsRequest,
    GetUserThemeSelectionsUseCase,
    SaveThemeSelectionsRequest,
    SaveThemeSelectionsUseCase,
    UserThemeItem,
)
from muse.application.usecase.user import (
    UpdateUserRequest,
    UpdateUserUseCase,
    UserSummary,
)
from muse.domain.service import TokenService
from muse.domain.value import Email, ThemeId
from muse.interface.api.schemas import Envelope
from muse.interface.api.security import require_session

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    """API request for updating the current user."""

    email: Email
    password: str | None = None


class SaveThemesAPIRequest(BaseModel):
    """API request for saving theme selections."""

    theme_ids: list[ThemeId]


@router.post(
    "",
    response_model=Envelope[CreateUserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: CreateUserRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> Envelope[CreateUserResponse]:
    """Register a local account and return its first session token.

    Example:
        POST /users
        {"email": "ada@example.com", "password": "..."}

        Response (201):
        {"data": {"token": "eyJ...", "theme_defined": false}, "error": null}
    """
    return Envelope(data=await create_user_use_case.execute(request))


@router.put("/me", response_model=Envelope[UserSummary])
async def update_me(
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    token_service: FromDishka[TokenService],
    authorization: str | None = Header(default=None),
) -> Envelope[UserSummary]:
    """Change the current user's email and, optionally, password.

    Setting a password on a federated account enables local login for it.
    """
    claims = require_session(token_service, authorization)
    user = await update_user_use_case.execute(
        UpdateUserRequest(
            user_id=claims.id, email=request.email, password=request.password
        )
    )
    return Envelope(data=user)


@router.post(
    "/me/themes",
    response_model=Envelope[list[UserThemeItem]],
    status_code=status.HTTP_201_CREATED,
)
async def save_my_themes(
    request: SaveThemesAPIRequest,
    save_theme_selections_use_case: FromDishka[SaveThemeSelectionsUseCase],
    token_service: FromDishka[TokenService],
    authorization: str | None = Header(default=None),
) -> Envelope[list[UserThemeItem]]:
    """Store the current user's theme selections.

    Example:
        POST /users/me/themes
        {"theme_ids": ["0b6e...", "5d1c..."]}

        Response (201):
        {"data": [{"id": "...", "user_id": "...", "theme_id": "0b6e..."}, ...], "error": null}
    """
    claims = require_session(token_service, authorization)
    result = await save_theme_selections_use_case.execute(
        SaveThemeSelectionsRequest(user_id=claims.id, theme_ids=request.theme_ids)
    )
    return Envelope(data=result.selections)


@router.get("/me/themes", response_model=Envelope[list[str]])
async def get_my_themes(
    get_user_theme_selections_use_case: FromDishka[GetUserThemeSelectionsUseCase],
    token_service: FromDishka[TokenService],
    authorization: str | None = Header(default=None),
) -> Envelope[list[str]]:
    """List the names of the current user's selected themes."""
    claims = require_session(token_service, authorization)
    result = await get_user_theme_selections_use_case.execute(
        GetUserThemeSelectionsRequest(user_id=claims.id)
    )
    return Envelope(data=result.names)
