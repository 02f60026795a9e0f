"""Password hashing domain service."""

import asyncio

import logfire
from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from muse.config import AuthSettings

from .base import Service


class CredentialHasher(Service):
    """Salted, adaptive password hashing with Argon2id.

    Hashing is CPU-bound, so both operations run in a worker thread and
    never block the event loop.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize hasher.

        Args:
            auth_settings: Authentication settings with Argon2 cost parameters
        """
        self._hasher = PasswordHasher(
            time_cost=auth_settings.password_time_cost,
            memory_cost=auth_settings.password_memory_cost,
            parallelism=auth_settings.password_parallelism,
            type=Type.ID,
        )

    async def hash(self, plaintext: str) -> str:
        """Hash a password. Each call produces a different digest.

        Args:
            plaintext: Password to hash

        Returns:
            Encoded Argon2 digest (salt and parameters included)
        """
        with logfire.span("credential_hasher.hash"):
            return await asyncio.to_thread(self._hasher.hash, plaintext)

    async def verify(self, plaintext: str, digest: str | None) -> bool:
        """Check a password against a stored digest.

        Never raises on a mismatch, a missing digest or a malformed digest.

        Args:
            plaintext: Candidate password
            digest: Stored digest, None for accounts without a password

        Returns:
            True if the password matches
        """
        if not digest:
            return False

        with logfire.span("credential_hasher.verify"):
            return await asyncio.to_thread(self._verify, plaintext, digest)

    def _verify(self, plaintext: str, digest: str) -> bool:
        # A non-ASCII digest fails to encode with UnicodeEncodeError, a ValueError
        try:
            return self._hasher.verify(digest, plaintext)
        except (VerificationError, InvalidHashError, ValueError):
            return False
