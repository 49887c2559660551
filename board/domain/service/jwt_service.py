"""JWT token domain service."""

import logfire

from board.config import AuthSettings
from board.domain.error import UnauthenticatedError
from board.domain.value import UserId, UserIdentity
from board.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, identity: UserIdentity) -> str:
        """Create JWT token for an identity.

        Args:
            identity: User identity to embed

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=identity.id):
            return create_token(identity.id, identity.username, self.auth_settings)

    def verify_token(self, token: str) -> UserIdentity:
        """Verify JWT token and extract the identity.

        Args:
            token: JWT token string

        Returns:
            Identity carried by the token

        Raises:
            UnauthenticatedError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                identity = UserIdentity(
                    id=UserId(int(payload.sub)), username=payload.username
                )
            except (JWTError, ValueError) as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise UnauthenticatedError("Invalid or expired token") from e
            return identity
