"""Login use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import AuthService

from .response import AuthResponse, UserResponse


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for an access token."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Check credentials and issue a token.

        Raises:
            UnauthenticatedError: On unknown user or wrong password
        """
        user = await self.auth_service.authenticate(request.username, request.password)
        token = self.auth_service.issue_token(user.identity())
        return AuthResponse(token=token, user=UserResponse.from_user(user))
