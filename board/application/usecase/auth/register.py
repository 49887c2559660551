"""Register use case."""

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import AuthService

from .response import AuthResponse, UserResponse


class RegisterRequest(BaseModel):
    username: str
    email: str
    password: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Register the user and return their first token.

        Raises:
            ValidationError: If username or email is malformed
            AlreadyExistsError: If the username or email is taken
        """
        user, token = await self.auth_service.register(
            request.username, request.email, request.password
        )
        logfire.info("User registered", user_id=user.id)
        return AuthResponse(token=token, user=UserResponse.from_user(user))
