"""Authentication use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import (
    FederatedLoginRequest,
    FederatedLoginUseCase,
    LocalLoginRequest,
    LocalLoginUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from .password_reset import (
    PerformPasswordResetRequest,
    PerformPasswordResetUseCase,
    RequestPasswordResetRequest,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
)

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "FederatedLoginRequest",
    "FederatedLoginUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LocalLoginRequest",
    "LocalLoginUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "PerformPasswordResetRequest",
    "PerformPasswordResetUseCase",
    "RequestPasswordResetRequest",
    "RequestPasswordResetResponse",
    "RequestPasswordResetUseCase",
]
