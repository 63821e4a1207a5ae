"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qna.domain.model import User
from qna.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate."""

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
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query.

        Used to attach author details to listings without one lookup per row.
        Unknown IDs are skipped.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the username or email is already taken
        """
        pass
