"""Unit tests for AuthService."""

import pytest

from board.config import AuthSettings
from board.domain.error import (
    AlreadyExistsError,
    UnauthenticatedError,
    ValidationError,
)
from board.domain.service import AuthService, JWTService
from board.domain.value import UserId, UserIdentity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for account registration."""

    @pytest.mark.asyncio
    async def test_register_returns_user_and_token(self, unit_env):
        auth = await unit_env.get(AuthService)

        user, token = await auth.register("alice", "Alice@Example.com", "s3cret")

        assert user.id == 1
        assert user.username.root == "alice"
        assert user.email.root == "alice@example.com"
        assert user.password_hash != "s3cret"
        assert auth.verify_token(token) == user.identity()

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        auth = await unit_env.get(AuthService)
        await auth.register("alice", "alice@example.com", "pw")

        with pytest.raises(AlreadyExistsError):
            await auth.register("alice", "other@example.com", "pw")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        auth = await unit_env.get(AuthService)
        await auth.register("alice", "alice@example.com", "pw")

        with pytest.raises(AlreadyExistsError):
            await auth.register("alice2", "ALICE@example.com", "pw")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,email",
        [
            ("al", "al@example.com"),
            ("has space", "space@example.com"),
            ("valid_name", "not-an-email"),
        ],
    )
    async def test_malformed_input_rejected(self, unit_env, username, email):
        auth = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            await auth.register(username, email, "pw")


class TestAuthenticate:
    """Tests for credential checks."""

    @pytest.mark.asyncio
    async def test_valid_credentials(self, unit_env):
        auth = await unit_env.get(AuthService)
        registered, _ = await auth.register("alice", "alice@example.com", "pw")

        user = await auth.authenticate("alice", "pw")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        auth = await unit_env.get(AuthService)
        await auth.register("alice", "alice@example.com", "pw")

        with pytest.raises(UnauthenticatedError, match="Invalid credentials"):
            await auth.authenticate("alice", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        auth = await unit_env.get(AuthService)

        with pytest.raises(UnauthenticatedError, match="Invalid credentials"):
            await auth.authenticate("nobody", "pw")


class TestTokens:
    """Tests for resolving bearer tokens."""

    @pytest.mark.asyncio
    async def test_header_resolves_identity(self, unit_env, alice):
        auth = await unit_env.get(AuthService)
        token = auth.issue_token(alice)

        assert auth.identity_from_header(f"Bearer {token}") == alice

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header", [None, "", "Bearer ", "Basic abc", "Bearer not-a-token"]
    )
    async def test_bad_header_rejected(self, unit_env, header):
        auth = await unit_env.get(AuthService)

        with pytest.raises(UnauthenticatedError):
            auth.identity_from_header(header)

    def test_token_signed_with_other_secret_rejected(self):
        identity = UserIdentity(id=UserId(1), username="alice")
        foreign = JWTService(AuthSettings(jwt_secret="other-secret"))
        local = JWTService(AuthSettings(jwt_secret="local-secret"))

        with pytest.raises(UnauthenticatedError):
            local.verify_token(foreign.create_token(identity))

    def test_expired_token_rejected(self):
        identity = UserIdentity(id=UserId(1), username="alice")
        service = JWTService(AuthSettings(jwt_expiry_minutes=-1))

        with pytest.raises(UnauthenticatedError, match="Invalid or expired token"):
            service.verify_token(service.create_token(identity))
