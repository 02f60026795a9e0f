"""Create user use case."""

import logfire
from pydantic import BaseModel, Field

from muse.domain.error import ConflictError
from muse.domain.service import CredentialHasher, TokenService, UserService
from muse.domain.value import Email


class CreateUserRequest(BaseModel):
    """Create user request."""

    email: Email
    password: str = Field(min_length=1)


class CreateUserResponse(BaseModel):
    """Create user response."""

    token: str  # Session token for the new account
    theme_defined: bool


class CreateUserUseCase:
    """Use case for registering a local (password) account."""

    def __init__(
        self,
        user_service: UserService,
        credential_hasher: CredentialHasher,
        token_service: TokenService,
    ) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
            credential_hasher: Password hashing service
            token_service: Bearer token service
        """
        self.user_service = user_service
        self.credential_hasher = credential_hasher
        self.token_service = token_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow.

        Steps:
        1. Reject an email that is already registered
        2. Hash the password
        3. Store the user
        4. Issue a session token

        Args:
            request: Email and password

        Returns:
            Session token for the new user

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("create_user.execute"):
            if await self.user_service.get_by_email(request.email) is not None:
                logfire.info("Registration rejected, email taken")
                raise ConflictError("Invalid Email.")

            password_hash = await self.credential_hasher.hash(request.password)

            try:
                user = await self.user_service.create(
                    request.email, password_hash=password_hash
                )
            except ConflictError:
                # Lost a race with a concurrent registration
                raise ConflictError("Invalid Email.") from None

            token = self.token_service.issue_session_token(user)
            logfire.info("User registered", user_id=str(user.id))

            return CreateUserResponse(token=token, theme_defined=user.theme_defined)
