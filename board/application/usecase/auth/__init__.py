"""Authentication use cases."""

from .get_current_user import GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase
from .response import AuthResponse, UserResponse

__all__ = [
    "AuthResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "UserResponse",
]
