"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import AlreadyExistsError
from board.domain.model import NewUser, User
from board.domain.repository import UserRepository
from board.domain.value import Email, UserId, Username
from board.persistence.database import storage_operation
from board.persistence.mappers import new_user_to_dict, row_to_user
from board.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_operation
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_operation
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_operation
    async def exists(self, username: Username, email: Email) -> bool:
        """Check whether the username or email is taken."""
        stmt = (
            select(users_table.c.id)
            .where(
                or_(
                    users_table.c.username == username.root,
                    users_table.c.email == email.root,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    @storage_operation
    async def create(self, new_user: NewUser) -> User:
        """Insert a user; unique constraints guard concurrent sign-ups."""
        stmt = (
            insert(users_table)
            .values(**new_user_to_dict(new_user))
            .returning(users_table)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            raise AlreadyExistsError("Username or email already registered") from e

        row = result.one()
        await self.session.flush()
        return row_to_user(row._asdict())
