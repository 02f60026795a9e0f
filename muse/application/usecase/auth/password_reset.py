"""Password recovery use cases."""

import logfire
from pydantic import BaseModel, Field

from muse.application.usecase.user.summary import UserSummary
from muse.config import Settings
from muse.domain.error import NotFoundError, UnauthorizedError
from muse.domain.model.user import UserPatch
from muse.domain.service import (
    CredentialHasher,
    EmailSender,
    TokenService,
    UserService,
)
from muse.domain.value import Email


class RequestPasswordResetRequest(BaseModel):
    """Request password reset request."""

    email: Email


class RequestPasswordResetResponse(BaseModel):
    """Request password reset response."""

    message: str = "Email delivered."


class RequestPasswordResetUseCase:
    """Use case for emailing a password recovery link."""

    def __init__(
        self,
        settings: Settings,
        user_service: UserService,
        token_service: TokenService,
        email_sender: EmailSender,
    ) -> None:
        """Initialize request password reset use case.

        Args:
            settings: Application settings, for the reset page URL
            user_service: User domain service
            token_service: Bearer token service
            email_sender: Outbound email port
        """
        self.settings = settings
        self.user_service = user_service
        self.token_service = token_service
        self.email_sender = email_sender

    async def execute(
        self, request: RequestPasswordResetRequest
    ) -> RequestPasswordResetResponse:
        """Execute request password reset flow.

        Steps:
        1. Require a registered email
        2. Issue a recovery token bound to it
        3. Email the reset link

        Raises:
            NotFoundError: If no user has the email
            EmailDeliveryError: If the mail server rejects the message
        """
        with logfire.span("request_password_reset.execute"):
            user = await self.user_service.get_by_email(request.email)
            if user is None:
                raise NotFoundError("E-mail not found.")

            token = self.token_service.issue_recovery_token(user.email)
            reset_link = f"{self.settings.password_reset_url}?token={token}"
            await self.email_sender.send_password_recovery(user.email, reset_link)

            logfire.info("Password recovery email sent", user_id=str(user.id))
            return RequestPasswordResetResponse()


class PerformPasswordResetRequest(BaseModel):
    """Perform password reset request."""

    token: str | None  # Recovery token
    password: str = Field(min_length=1)


class PerformPasswordResetUseCase:
    """Use case for setting a new password with a recovery token."""

    def __init__(
        self,
        user_service: UserService,
        token_service: TokenService,
        credential_hasher: CredentialHasher,
    ) -> None:
        self.user_service = user_service
        self.token_service = token_service
        self.credential_hasher = credential_hasher

    async def execute(self, request: PerformPasswordResetRequest) -> UserSummary:
        """Execute perform password reset flow.

        A recovery token stays usable until it expires.

        Raises:
            UnauthorizedError: If the token is not a valid recovery token
            NotFoundError: If the account was removed after the token was issued
        """
        with logfire.span("perform_password_reset.execute"):
            claims = self.token_service.verify_recovery(request.token)
            if claims is None:
                raise UnauthorizedError("Invalid token, try again.")

            user = await self.user_service.get_by_email(claims.email)
            if user is None:
                raise NotFoundError("E-mail not found.")

            password_hash = await self.credential_hasher.hash(request.password)
            user = await self.user_service.update(
                user.id, UserPatch(password_hash=password_hash)
            )

            logfire.info("Password reset", user_id=str(user.id))
            return UserSummary.from_user(user)
