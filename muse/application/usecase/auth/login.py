"""Login use cases.

Two login paths exist. Local login checks a password. Federated login
trusts an identity already verified by an external provider (Google) and
creates the account on first sight of its email.
"""

from typing import Annotated, Any, Literal, Union

import logfire
from pydantic import BaseModel, Discriminator, Field, Tag

from muse.domain.error import ConflictError, NotFoundError, UnauthorizedError
from muse.domain.model.user import User
from muse.domain.service import CredentialHasher, TokenService, UserService
from muse.domain.value import Email


class LocalLoginRequest(BaseModel):
    """Email and password login."""

    method: Literal["local"] = "local"
    email: Email
    password: str


class FederatedLoginRequest(BaseModel):
    """Login with an identity verified by an external provider."""

    method: Literal["federated"] = "federated"
    email: Email
    federated_id: str = Field(min_length=1)


def login_method(value: Any) -> str:
    """Pick the login path.

    An explicit ``method`` wins; otherwise supplying a federated id selects
    the federated path.
    """
    if isinstance(value, dict):
        method = value.get("method")
        if method is not None:
            return str(method)
        return "federated" if value.get("federated_id") else "local"
    return getattr(value, "method", "local")


LoginRequest = Annotated[
    Union[
        Annotated[LocalLoginRequest, Tag("local")],
        Annotated[FederatedLoginRequest, Tag("federated")],
    ],
    Discriminator(login_method),
]


class LoginResponse(BaseModel):
    """Login response."""

    token: str  # Session token
    theme_defined: bool
    created: bool = False  # True when federated login created the account


class LocalLoginUseCase:
    """Use case for email and password login."""

    def __init__(
        self,
        user_service: UserService,
        credential_hasher: CredentialHasher,
        token_service: TokenService,
    ) -> None:
        self.user_service = user_service
        self.credential_hasher = credential_hasher
        self.token_service = token_service

    async def execute(self, request: LocalLoginRequest) -> LoginResponse:
        """Execute local login flow.

        Steps:
        1. Look the email up
        2. Check the password against the stored digest
        3. Issue a session token

        An account without a password fails the password check.

        Raises:
            NotFoundError: If no user has the email
            UnauthorizedError: If the password does not match
        """
        with logfire.span("local_login.execute"):
            user = await self.user_service.get_by_email(request.email)
            if user is None:
                raise NotFoundError("Credentials not found.")

            if not await self.credential_hasher.verify(
                request.password, user.password_hash
            ):
                logfire.info("Local login rejected", user_id=str(user.id))
                raise UnauthorizedError("Credentials doesn't match.")

            logfire.info("Local login succeeded", user_id=str(user.id))
            return LoginResponse(
                token=self.token_service.issue_session_token(user),
                theme_defined=user.theme_defined,
            )


class FederatedLoginUseCase:
    """Use case for login with a federated identity."""

    def __init__(
        self, user_service: UserService, token_service: TokenService
    ) -> None:
        self.user_service = user_service
        self.token_service = token_service

    async def execute(self, request: FederatedLoginRequest) -> LoginResponse:
        """Execute federated login flow.

        Steps:
        1. Look the email up
        2. Unknown email: create a federated account
        3. Known email: the stored federated id must match

        An existing password-only account is never linked implicitly; the
        request is rejected.

        Raises:
            UnauthorizedError: If the email belongs to a different identity
        """
        with logfire.span("federated_login.execute"):
            user = await self.user_service.get_by_email(request.email)
            created = False

            if user is None:
                try:
                    user = await self.user_service.create(
                        request.email, federated_id=request.federated_id
                    )
                    created = True
                except ConflictError:
                    # A concurrent request registered the email first
                    user = await self.user_service.get_by_email(request.email)
                    if user is None:
                        raise

            if not created:
                self._check_identity(user, request.federated_id)

            logfire.info(
                "Federated login succeeded", user_id=str(user.id), created=created
            )
            return LoginResponse(
                token=self.token_service.issue_session_token(user),
                theme_defined=user.theme_defined,
                created=created,
            )

    @staticmethod
    def _check_identity(user: User, federated_id: str) -> None:
        if user.federated_id != federated_id:
            logfire.info("Federated login rejected", user_id=str(user.id))
            raise UnauthorizedError("Credentials doesn't match.")


class LoginUseCase:
    """Dispatches a login request to the path named by its ``method``."""

    def __init__(
        self,
        local_login: LocalLoginUseCase,
        federated_login: FederatedLoginUseCase,
    ) -> None:
        """Initialize login use case.

        Args:
            local_login: Password login path
            federated_login: Federated identity login path
        """
        self.local_login = local_login
        self.federated_login = federated_login

    async def execute(
        self, request: LocalLoginRequest | FederatedLoginRequest
    ) -> LoginResponse:
        """Execute the login path selected by the request.

        Returns:
            Session token, the user's ``theme_defined`` flag and whether the
            account was just created

        Raises:
            UnauthorizedError: If the credentials are rejected
            NotFoundError: If a local login names an unknown email
        """
        if isinstance(request, FederatedLoginRequest):
            return await self.federated_login.execute(request)
        return await self.local_login.execute(request)
