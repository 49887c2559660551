"""Domain value objects for the comment board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from board.domain.common import RootValueObject, ValueObject
from board.domain.value.identifiers import UserId


class VoteDirection(str, Enum):
    """Direction of a vote on a comment."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Score contribution of a single vote in this direction."""
        return 1 if self is VoteDirection.UP else -1

    @property
    def opposite(self) -> "VoteDirection":
        """The other direction."""
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP


class Username(RootValueObject[str]):
    """Unique public name of a registered user.

    Must be 3-50 characters of letters, digits, underscores, dots or hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address of a registered user (normalized to lowercase)."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape and normalize case."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v


class UserIdentity(ValueObject):
    """Resolved identity of an authenticated caller.

    The core only ever sees this pair; raw credentials stay in the
    authentication service.
    """

    id: UserId
    username: str
