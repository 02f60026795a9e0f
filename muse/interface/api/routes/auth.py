"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel, Field

from muse.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    PerformPasswordResetRequest,
    PerformPasswordResetUseCase,
    RequestPasswordResetRequest,
    RequestPasswordResetUseCase,
)
from muse.application.usecase.user import UserSummary
from muse.interface.api.schemas import Envelope, MessageResponse
from muse.interface.api.security import bearer_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class PasswordResetAPIRequest(BaseModel):
    """API request for setting a new password."""

    password: str = Field(min_length=1)


@router.post("/login", response_model=Envelope[LoginResponse])
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
) -> Envelope[LoginResponse]:
    """Log in with a password or a federated identity.

    A federated login for an unknown email creates the account and answers
    201; every other success answers 200. ``method`` may be omitted: a
    ``federated_id`` then selects the federated path, otherwise the local one.

    Example:
        POST /auth/login
        {"method": "local", "email": "ada@example.com", "password": "..."}

        POST /auth/login
        {"method": "federated", "email": "ada@example.com", "federated_id": "1098..."}

        Response:
        {"data": {"token": "eyJ...", "theme_defined": false, "created": false}, "error": null}
    """
    result = await login_use_case.execute(request)

    if result.created:
        response.status_code = status.HTTP_201_CREATED
        logger.info("Account created through federated login")

    return Envelope(data=result)


@router.get("/me", response_model=Envelope[UserSummary])
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[UserSummary]:
    """Get the user named by the session token."""
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=bearer_token(authorization))
    )
    return Envelope(data=user)


@router.post("/password/recover", response_model=MessageResponse)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    request_password_reset_use_case: FromDishka[RequestPasswordResetUseCase],
) -> MessageResponse:
    """Email a password reset link to a registered address.

    Example:
        POST /auth/password/recover
        {"email": "ada@example.com"}

        Response:
        {"message": "Email delivered."}
    """
    result = await request_password_reset_use_case.execute(request)
    return MessageResponse(message=result.message)


@router.post("/password/reset", response_model=Envelope[UserSummary])
async def perform_password_reset(
    request: PasswordResetAPIRequest,
    perform_password_reset_use_case: FromDishka[PerformPasswordResetUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[UserSummary]:
    """Set a new password using the recovery token from the reset link.

    The recovery token is sent as ``Authorization: Bearer <token>``.
    """
    user = await perform_password_reset_use_case.execute(
        PerformPasswordResetRequest(
            token=bearer_token(authorization), password=request.password
        )
    )
    logger.info("Password reset completed")
    return Envelope(data=user)
