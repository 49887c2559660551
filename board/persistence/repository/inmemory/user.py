"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.error import AlreadyExistsError
from board.domain.model.user import NewUser, User
from board.domain.repository.user import UserRepository
from board.domain.value import Email, UserId, Username

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.db.users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self.db.users.values():
            if user.username == username:
                return user
        return None

    async def exists(self, username: Username, email: Email) -> bool:
        """Check whether the username or email is taken."""
        return any(
            user.username == username or user.email == email
            for user in self.db.users.values()
        )

    async def create(self, new_user: NewUser) -> User:
        """Store a user under the next ID."""
        if await self.exists(new_user.username, new_user.email):
            raise AlreadyExistsError("Username or email already registered")

        user = User(
            id=UserId(self.db.next_id("users")),
            username=new_user.username,
            email=new_user.email,
            password_hash=new_user.password_hash,
            created_at=datetime.now(),
        )
        self.db.users[user.id] = user
        return user
