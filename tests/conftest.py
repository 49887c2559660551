"""Test configuration and fixtures."""

import logfire
import pytest

from board.domain.value import UserId, UserIdentity

logfire.configure(send_to_logfire=False, console=False)


def make_identity(user_id: int = 1, username: str = "alice") -> UserIdentity:
    """Build an authenticated identity for service-level tests."""
    return UserIdentity(id=UserId(user_id), username=username)


@pytest.fixture
def alice() -> UserIdentity:
    return make_identity(1, "alice")


@pytest.fixture
def bob() -> UserIdentity:
    return make_identity(2, "bob")
