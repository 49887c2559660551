"""Authentication domain service."""

import logfire

from board.domain.error import AlreadyExistsError, UnauthenticatedError, ValidationError
from board.domain.model import NewUser, User
from board.domain.value import Email, UserIdentity, Username
from board.util.security import hash_password, verify_password

from .base import Service
from .jwt_service import JWTService
from .user_service import UserService

BEARER_PREFIX = "Bearer "


class AuthService(Service):
    """Registers users, checks credentials and resolves access tokens.

    This is the only place raw credentials are handled; the rest of the
    domain works with ``UserIdentity``.
    """

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            jwt_service: Token issuing service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def register(
        self, username: str, email: str, password: str
    ) -> tuple[User, str]:
        """Create an account and issue its first access token.

        Args:
            username: Requested username
            email: Email address
            password: Plain text password

        Returns:
            Tuple of (created user, access token)

        Raises:
            ValidationError: If username or email is malformed
            AlreadyExistsError: If the username or email is taken
        """
        with logfire.span("auth_service.register", username=username):
            try:
                valid_username = Username(username)
                valid_email = Email(email)
            except ValueError as e:
                raise ValidationError(str(e)) from e

            if await self.user_service.is_taken(valid_username, valid_email):
                logfire.warn("Registration for taken username or email", username=username)
                raise AlreadyExistsError("Username or email already registered")

            user = await self.user_service.create(
                NewUser(
                    username=valid_username,
                    email=valid_email,
                    password_hash=hash_password(password),
                )
            )
            return user, self.issue_token(user.identity())

    async def authenticate(self, username: str, password: str) -> User:
        """Check a username/password pair.

        Raises:
            UnauthenticatedError: On unknown user or wrong password
        """
        with logfire.span("auth_service.authenticate", username=username):
            try:
                valid_username = Username(username)
            except ValueError:
                raise UnauthenticatedError("Invalid credentials")

            user = await self.user_service.get_by_username(valid_username)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt", username=username)
                raise UnauthenticatedError("Invalid credentials")

            logfire.info("User authenticated", user_id=user.id)
            return user

    def issue_token(self, identity: UserIdentity) -> str:
        """Issue an access token for an identity."""
        return self.jwt_service.create_token(identity)

    def verify_token(self, token: str) -> UserIdentity:
        """Resolve an access token to the identity it carries.

        Raises:
            UnauthenticatedError: If the token is invalid or expired
        """
        return self.jwt_service.verify_token(token)

    def identity_from_header(self, authorization: str | None) -> UserIdentity:
        """Resolve an ``Authorization: Bearer <token>`` header.

        Raises:
            UnauthenticatedError: If the header is missing or malformed
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise UnauthenticatedError()

        token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            raise UnauthenticatedError()
        return self.verify_token(token)
