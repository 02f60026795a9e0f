"""Update user use case."""

import logfire
from pydantic import BaseModel

from muse.application.usecase.user.summary import UserSummary
from muse.domain.error import ConflictError
from muse.domain.model.user import UserPatch
from muse.domain.service import CredentialHasher, UserService
from muse.domain.value import Email, UserId


class UpdateUserRequest(BaseModel):
    """Update user request."""

    user_id: UserId  # From the authenticated session
    email: Email
    password: str | None = None


class UpdateUserUseCase:
    """Use case for changing the email and, optionally, the password of a user.

    Setting a password on a federated-only account merges the two
    credentials: the account then accepts both login paths.
    """

    def __init__(
        self, user_service: UserService, credential_hasher: CredentialHasher
    ) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
            credential_hasher: Password hashing service
        """
        self.user_service = user_service
        self.credential_hasher = credential_hasher

    async def execute(self, request: UpdateUserRequest) -> UserSummary:
        """Execute update user flow.

        Steps:
        1. Reject an email owned by a different user
        2. Hash the new password, if one was given
        3. Persist the partial update

        Args:
            request: Authenticated user id and new values

        Returns:
            Updated user summary

        Raises:
            ConflictError: If another user owns the email
            NotFoundError: If the user no longer exists
        """
        with logfire.span("update_user.execute", user_id=str(request.user_id)):
            owner = await self.user_service.get_by_email(request.email)
            if owner is not None and owner.id != request.user_id:
                raise ConflictError("Invalid email.")

            password_hash = None
            if request.password:
                password_hash = await self.credential_hasher.hash(request.password)

            user = await self.user_service.update(
                request.user_id,
                UserPatch(email=request.email, password_hash=password_hash),
            )
            return UserSummary.from_user(user)
