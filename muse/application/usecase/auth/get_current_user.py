"""Get current user use case."""

from pydantic import BaseModel

from muse.application.usecase.user.summary import UserSummary
from muse.domain.error import UnauthorizedError
from muse.domain.service import TokenService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # Session token


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(
        self, token_service: TokenService, user_service: UserService
    ) -> None:
        """Initialize get current user use case.

        Args:
            token_service: Bearer token service
            user_service: User domain service
        """
        self.token_service = token_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserSummary:
        """Execute get current user flow.

        Steps:
        1. Verify the session token
        2. Load the user named by its ``id`` claim

        Raises:
            UnauthorizedError: If the token is missing, invalid or expired
            NotFoundError: If the user no longer exists
        """
        claims = self.token_service.verify_session(request.token)
        if claims is None:
            raise UnauthorizedError("Invalid token, try again.")

        user = await self.user_service.require_by_id(claims.id)
        return UserSummary.from_user(user)
