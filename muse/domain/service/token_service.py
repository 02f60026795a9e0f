"""Bearer token domain service."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable
from uuid import UUID

import logfire

from muse.config import AuthSettings
from muse.domain.model.user import User
from muse.domain.value import Email, RecoveryClaims, SessionClaims, TokenPurpose
from muse.util.jwt import JWTError, create_token, signing_secret, verify_token

from .base import Service


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService(Service):
    """Issues and verifies signed, time-limited bearer tokens.

    Tokens are stateless: nothing is stored server-side and expiry is the
    only way a token stops being valid.

    Two token shapes exist. Session tokens carry ``id``, ``email`` and
    ``themeDefined``; recovery tokens carry only ``email``. Both carry a
    ``purpose`` claim and each verifier accepts only its own purpose.
    """

    def __init__(
        self,
        auth_settings: AuthSettings,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
            clock: Source of the current time

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        signing_secret(auth_settings)
        self.auth_settings = auth_settings
        self.clock = clock

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(hours=self.auth_settings.session_token_ttl_hours)

    @property
    def recovery_ttl(self) -> timedelta:
        return timedelta(minutes=self.auth_settings.recovery_token_ttl_minutes)

    def issue(self, claims: dict[str, Any], ttl: timedelta) -> str:
        """Sign ``claims`` with an expiry of now + ``ttl``.

        Args:
            claims: JSON-serializable claims
            ttl: Validity window

        Returns:
            Encoded token
        """
        return create_token(claims, ttl, self.clock(), self.auth_settings)

    def verify(self, token: str) -> dict[str, Any] | None:
        """Check signature and expiry.

        Args:
            token: Encoded token

        Returns:
            The signed claims (plus ``iat``/``exp``), or None when the token
            is malformed, badly signed or expired
        """
        try:
            return verify_token(token, self.clock(), self.auth_settings)
        except JWTError as e:
            logfire.debug("Token rejected", reason=str(e))
            return None

    def issue_session_token(self, user: User) -> str:
        """Mint a session token for ``user``."""
        with logfire.span("token_service.issue_session_token", user_id=str(user.id)):
            token = self.issue(
                {
                    "id": str(user.id),
                    "email": user.email.root,
                    "themeDefined": user.theme_defined,
                    "purpose": TokenPurpose.SESSION.value,
                },
                self.session_ttl,
            )
            logfire.info("Session token issued", user_id=str(user.id))
            return token

    def issue_recovery_token(self, email: Email) -> str:
        """Mint a short-lived recovery token bound to ``email``."""
        with logfire.span("token_service.issue_recovery_token"):
            return self.issue(
                {"email": email.root, "purpose": TokenPurpose.RECOVERY.value},
                self.recovery_ttl,
            )

    def verify_session(self, token: str | None) -> SessionClaims | None:
        """Verify a session token.

        Recovery tokens are rejected.

        Returns:
            Session claims, or None if the token is missing or not a valid
            session token
        """
        payload = self._verify_purpose(token, TokenPurpose.SESSION)
        if payload is None:
            return None

        try:
            return SessionClaims(
                id=UUID(payload["id"]),
                email=payload["email"],
                themeDefined=payload["themeDefined"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError):
            logfire.debug("Session token has unexpected claims")
            return None

    def verify_recovery(self, token: str | None) -> RecoveryClaims | None:
        """Verify a recovery token.

        Session tokens are rejected.

        Returns:
            Recovery claims, or None if the token is missing or not a valid
            recovery token
        """
        payload = self._verify_purpose(token, TokenPurpose.RECOVERY)
        if payload is None:
            return None

        try:
            return RecoveryClaims(
                email=payload["email"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError):
            logfire.debug("Recovery token has unexpected claims")
            return None

    def _verify_purpose(
        self, token: str | None, purpose: TokenPurpose
    ) -> dict[str, Any] | None:
        if not token:
            return None

        payload = self.verify(token)
        if payload is None or payload.get("purpose") != purpose.value:
            return None
        return payload
