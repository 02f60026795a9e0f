"""Domain layer errors.

Each error carries the HTTP-style status the interface layer renders and a
message safe to show to the caller.
"""

from uuid import UUID


class DomainError(Exception):
    """Base domain error."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed caller input."""

    status_code = 400


class UnauthorizedError(DomainError):
    """Credential mismatch or invalid/expired token."""

    status_code = 401


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    status_code = 404


class ConflictError(DomainError):
    """Uniqueness or validity violation."""

    status_code = 409


class InvalidThemeSelectionError(ConflictError):
    """Raised when a selection references themes missing from the catalog."""

    def __init__(self, invalid_ids: list[UUID]):
        self.invalid_ids = invalid_ids
        super().__init__("Invalid theme Id(s).")
