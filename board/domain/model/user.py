"""User entity."""

from datetime import datetime

from pydantic import Field

from board.domain.common import DomainModel
from board.domain.value import Email, UserId, UserIdentity, Username


class NewUser(DomainModel):
    """Registration data before the store assigns an identifier."""

    username: Username
    email: Email
    password_hash: str


class User(DomainModel):
    """Registered user.

    Immutable once created; the password hash never leaves the identity
    services.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.now)

    def identity(self) -> UserIdentity:
        """Return the identity carried in access tokens."""
        return UserIdentity(id=self.id, username=self.username.root)
