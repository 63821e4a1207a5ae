"""Unit tests for AuthService."""

import warnings

import pytest

from qna.domain.error import AuthenticationError, InvalidOperationError, ValidationError
from qna.domain.repository import UserRepository
from qna.domain.service import AuthService, JWTService
from qna.domain.value import Email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await auth_service.register("alice", "Alice@Example.com", "secret1")

        # Assert
        assert user.username.root == "alice"
        assert user.email.root == "alice@example.com"
        assert user.password_hash != "secret1"
        assert user.password_hash.startswith("$2")
        assert await user_repo.find_by_email(Email("alice@example.com")) is not None

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "alice@example.com", "secret1")

        # Act & Assert
        with pytest.raises(InvalidOperationError, match="already exists"):
            await auth_service.register("alice2", "ALICE@example.com", "secret2")

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "alice@example.com", "secret1")

        # Act & Assert
        with pytest.raises(InvalidOperationError):
            await auth_service.register("alice", "other@example.com", "secret2")

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        with pytest.raises(ValidationError, match="at least 6"):
            await auth_service.register("alice", "alice@example.com", "12345")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register("bob", "bob@example.com", "hunter22")

        # Act
        user = await auth_service.authenticate("BOB@example.com", "hunter22")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("bob", "bob@example.com", "hunter22")

        # Act & Assert
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await auth_service.authenticate("bob@example.com", "hunter23")

    @pytest.mark.asyncio
    async def test_unknown_or_malformed_email(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        with pytest.raises(AuthenticationError):
            await auth_service.authenticate("nobody@example.com", "whatever")
        with pytest.raises(AuthenticationError):
            await auth_service.authenticate("not-an-email", "whatever")


class TestTokenSigning:
    """Tests for token signing under the test configuration."""

    @pytest.mark.asyncio
    async def test_signing_key_is_long_enough(self, unit_env):
        # Arrange
        jwt_service = await unit_env.get(JWTService)

        # Act
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            token = jwt_service.create_token("user-1", "alice")

        # Assert
        assert len(jwt_service.auth_settings.jwt_secret.encode()) >= 32
        assert not [w for w in caught if "KeyLength" in w.category.__name__]
        assert jwt_service.verify_token(token).username == "alice"
