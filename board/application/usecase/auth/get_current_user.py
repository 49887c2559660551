"""Get current user use case."""

from board.domain.service import AuthService
from board.domain.value import UserIdentity


class GetCurrentUserUseCase:
    """Resolves the caller's identity from the Authorization header."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, authorization: str | None) -> UserIdentity:
        """Return the identity behind a bearer token.

        Raises:
            UnauthenticatedError: If the header is missing, malformed or expired
        """
        return self.auth_service.identity_from_header(authorization)
