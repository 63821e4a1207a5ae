"""Auth use cases."""

from .get_current_user import (
    CurrentUserResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginUseCase
from .register import AuthResponse, RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "CurrentUserResponse",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
