"""Application layer DI providers."""

from dishka import Scope, provide

from muse.application.usecase.auth import (
    CreateUserUseCase,
    FederatedLoginUseCase,
    GetCurrentUserUseCase,
    LocalLoginUseCase,
    LoginUseCase,
    PerformPasswordResetUseCase,
    RequestPasswordResetUseCase,
)
from muse.application.usecase.theme import (
    GetThemeCatalogUseCase,
    GetUserThemeSelectionsUseCase,
    SaveThemeSelectionsUseCase,
)
from muse.application.usecase.user import UpdateUserUseCase
from muse.config import Settings
from muse.domain.service import (
    CredentialHasher,
    EmailSender,
    ThemeService,
    TokenService,
    UserService,
)
from muse.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self,
        user_service: UserService,
        credential_hasher: CredentialHasher,
        token_service: TokenService,
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(
            user_service=user_service,
            credential_hasher=credential_hasher,
            token_service=token_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_local_login_use_case(
        self,
        user_service: UserService,
        credential_hasher: CredentialHasher,
        token_service: TokenService,
    ) -> LocalLoginUseCase:
        """Provide local login use case."""
        return LocalLoginUseCase(
            user_service=user_service,
            credential_hasher=credential_hasher,
            token_service=token_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_federated_login_use_case(
        self, user_service: UserService, token_service: TokenService
    ) -> FederatedLoginUseCase:
        """Provide federated login use case."""
        return FederatedLoginUseCase(
            user_service=user_service, token_service=token_service
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        local_login: LocalLoginUseCase,
        federated_login: FederatedLoginUseCase,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(local_login=local_login, federated_login=federated_login)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, token_service: TokenService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            token_service=token_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_request_password_reset_use_case(
        self,
        settings: Settings,
        user_service: UserService,
        token_service: TokenService,
        email_sender: EmailSender,
    ) -> RequestPasswordResetUseCase:
        """Provide request password reset use case."""
        return RequestPasswordResetUseCase(
            settings=settings,
            user_service=user_service,
            token_service=token_service,
            email_sender=email_sender,
        )

    @provide(scope=Scope.REQUEST)
    def get_perform_password_reset_use_case(
        self,
        user_service: UserService,
        token_service: TokenService,
        credential_hasher: CredentialHasher,
    ) -> PerformPasswordResetUseCase:
        """Provide perform password reset use case."""
        return PerformPasswordResetUseCase(
            user_service=user_service,
            token_service=token_service,
            credential_hasher=credential_hasher,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(
        self, user_service: UserService, credential_hasher: CredentialHasher
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(
            user_service=user_service, credential_hasher=credential_hasher
        )

    # Theme use cases
    @provide(scope=Scope.REQUEST)
    def get_theme_catalog_use_case(
        self, theme_service: ThemeService
    ) -> GetThemeCatalogUseCase:
        """Provide get theme catalog use case."""
        return GetThemeCatalogUseCase(theme_service=theme_service)

    @provide(scope=Scope.REQUEST)
    def get_save_theme_selections_use_case(
        self, theme_service: ThemeService
    ) -> SaveThemeSelectionsUseCase:
        """Provide save theme selections use case."""
        return SaveThemeSelectionsUseCase(theme_service=theme_service)

    @provide(scope=Scope.REQUEST)
    def get_user_theme_selections_use_case(
        self, theme_service: ThemeService
    ) -> GetUserThemeSelectionsUseCase:
        """Provide get user theme selections use case."""
        return GetUserThemeSelectionsUseCase(theme_service=theme_service)
