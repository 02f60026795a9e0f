"""Domain services."""

from .base import Service
from .credential_hasher import CredentialHasher
from .email_sender import EmailSender
from .theme_service import ThemeService
from .token_service import TokenService
from .user_service import UserService

__all__ = [
    "CredentialHasher",
    "EmailSender",
    "Service",
    "ThemeService",
    "TokenService",
    "UserService",
]
