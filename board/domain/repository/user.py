"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.user import NewUser, User
from board.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, username: Username, email: Email) -> bool:
        """Check whether the username or the email is already registered."""
        pass

    @abstractmethod
    async def create(self, new_user: NewUser) -> User:
        """Persist a new user and assign it an identifier.

        Raises:
            AlreadyExistsError: If the username or email is taken
        """
        pass
