"""User domain service."""

import logfire

from board.domain.error import NotFoundError
from board.domain.model import NewUser, User
from board.domain.repository import UnitOfWork, UserRepository
from board.domain.value import Email, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            unit_of_work: Transaction boundary for the current request
        """
        self.user_repository = user_repository
        self.unit_of_work = unit_of_work

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if user is None:
                logfire.info("User not found", username=username.root)
            return user

    async def is_taken(self, username: Username, email: Email) -> bool:
        """Check whether a username or email is already registered."""
        return await self.user_repository.exists(username, email)

    async def create(self, new_user: NewUser) -> User:
        """Create a user.

        Raises:
            AlreadyExistsError: If the username or email is taken
        """
        with logfire.span("user_service.create", username=new_user.username.root):
            async with self.unit_of_work.transaction():
                user = await self.user_repository.create(new_user)
            logfire.info("User created", user_id=user.id, username=user.username.root)
            return user
