"""Authentication domain service."""

from uuid import uuid4

import logfire

from qna.config import AuthSettings
from qna.domain.error import (
    AuthenticationError,
    InvalidOperationError,
    ValidationError,
    invalid_input,
)
from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import Email, UserId, Username
from qna.util.password import hash_password, verify_password

from .base import Service

MIN_PASSWORD_LENGTH = 6


class AuthService(Service):
    """Domain service for registration and password login."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, username: str, email: str, password: str) -> User:
        """Create a new account.

        Args:
            username: Desired username
            email: Email address
            password: Plaintext password, hashed before storage

        Returns:
            The new user

        Raises:
            ValidationError: If the password is too short
            InvalidOperationError: If the username or email is taken
        """
        with logfire.span("auth_service.register", username=username):
            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )

            with invalid_input():
                name = Username(username)
                address = Email(email)

            email_taken = await self.user_repository.find_by_email(address)
            username_taken = await self.user_repository.find_by_username(name)
            if email_taken or username_taken:
                logfire.warn("Duplicate registration", username=username)
                raise InvalidOperationError(
                    "User with this email or username already exists"
                )

            user = User(
                id=UserId(uuid4()),
                username=name,
                email=address,
                password_hash=hash_password(
                    password, rounds=self.auth_settings.bcrypt_rounds
                ),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email and password pair.

        Raises:
            AuthenticationError: If no user matches or the password is wrong
        """
        with logfire.span("auth_service.authenticate"):
            try:
                address = Email(email)
            except ValueError:
                raise AuthenticationError()

            user = await self.user_repository.find_by_email(address)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise AuthenticationError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user
