"""JWT token utilities."""

from datetime import datetime, timedelta
from typing import Any

import jwt

from muse.config import AuthSettings
from muse.util.error import ConfigurationError


class JWTError(Exception):
    """JWT-related error."""

    pass


def signing_secret(settings: AuthSettings) -> str:
    """Return the configured signing secret.

    Raises:
        ConfigurationError: If no secret is configured
    """
    if settings.jwt_secret is None or not settings.jwt_secret.get_secret_value():
        raise ConfigurationError("AUTH__JWT_SECRET must be configured")
    return settings.jwt_secret.get_secret_value()


def create_token(
    claims: dict[str, Any],
    ttl: timedelta,
    issued_at: datetime,
    settings: AuthSettings,
) -> str:
    """Create a signed JWT carrying ``claims``.

    Args:
        claims: Application claims to sign
        ttl: Validity window starting at ``issued_at``
        issued_at: Issue timestamp (timezone-aware)
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    payload = {
        **claims,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + ttl).timestamp()),
    }

    return jwt.encode(
        payload, signing_secret(settings), algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, now: datetime, settings: AuthSettings) -> dict[str, Any]:
    """Verify signature and expiry of a JWT token.

    Expiry is checked against ``now`` rather than the system clock.

    Args:
        token: JWT token to verify
        now: Current time (timezone-aware)
        settings: Authentication settings

    Returns:
        Decoded payload, including ``iat`` and ``exp``

    Raises:
        JWTError: If token is malformed, badly signed or expired
    """
    try:
        payload = jwt.decode(
            token,
            signing_secret(settings),
            algorithms=[settings.jwt_algorithm],
            options={
                "require": ["exp", "iat"],
                "verify_exp": False,
                "verify_iat": False,
            },
        )
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    if payload["exp"] <= now.timestamp():
        raise JWTError("Token has expired")

    return payload
