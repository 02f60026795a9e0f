"""Domain layer DI providers."""

from dishka import Scope, provide

from muse.config import AuthSettings
from muse.domain.repository import ThemeRepository, UserRepository
from muse.domain.service import (
    CredentialHasher,
    ThemeService,
    TokenService,
    UserService,
)
from muse.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services backed by repositories are REQUEST-scoped to align with the
    repository/session lifecycle. Stateless services are built once.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide bearer token service.

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        return TokenService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_credential_hasher(self, auth_settings: AuthSettings) -> CredentialHasher:
        """Provide password hashing service."""
        return CredentialHasher(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_theme_service(
        self, theme_repository: ThemeRepository, user_repository: UserRepository
    ) -> ThemeService:
        """Provide theme domain service."""
        return ThemeService(
            theme_repository=theme_repository, user_repository=user_repository
        )
