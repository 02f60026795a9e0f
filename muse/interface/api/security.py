"""Bearer token authentication for routes."""

from muse.domain.error import UnauthorizedError
from muse.domain.service import TokenService
from muse.domain.value import SessionClaims


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns:
        The token, or None if the header is missing or uses another scheme
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_session(
    token_service: TokenService, authorization: str | None
) -> SessionClaims:
    """Verify the session token carried by ``authorization``.

    Raises:
        UnauthorizedError: If the header is missing or the token is not a
            valid session token
    """
    claims = token_service.verify_session(bearer_token(authorization))
    if claims is None:
        raise UnauthorizedError("Invalid token, try again.")
    return claims
