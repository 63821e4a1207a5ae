"""User domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import logfire

from qna.domain.error import InvalidOperationError, NotFoundError, invalid_input
from qna.domain.model import ContentStats, User
from qna.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from qna.domain.value import Email, UserId, Username

from .base import Service


@dataclass
class UserStats:
    """Activity summary shown on a profile.

    Reputation is derived on every read as the summed score of the user's
    questions and answers; it is never stored.
    """

    questions: ContentStats
    answers: ContentStats

    @property
    def reputation(self) -> int:
        return self.questions.total_score + self.answers.total_score


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            question_repository: Question repository (for stats)
            answer_repository: Answer repository (for stats)
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If user not found or the username is malformed
        """
        with logfire.span("user_service.get_by_username", username=username):
            try:
                name = Username(username)
            except ValueError:
                raise NotFoundError("User", username)

            user = await self.user_repository.find_by_username(name)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def get_users(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch-load users by ID, keyed by ID.

        Used to attach author details to listings in one query.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def get_stats(self, user_id: UserId) -> UserStats:
        """Aggregate a user's questions and answers."""
        with logfire.span("user_service.get_stats", user_id=str(user_id)):
            questions = await self.question_repository.author_stats(user_id)
            answers = await self.answer_repository.author_stats(user_id)
            stats = UserStats(questions=questions, answers=answers)
            logfire.info(
                "User stats computed", user_id=str(user_id), reputation=stats.reputation
            )
            return stats

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[str] = None,
        email: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Update profile fields; None leaves a field unchanged.

        Raises:
            NotFoundError: If the user does not exist
            InvalidOperationError: If the new username or email is taken
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            data = user.model_dump()
            if username is not None:
                with invalid_input():
                    new_username = Username(username)
                existing = await self.user_repository.find_by_username(new_username)
                if existing and existing.id != user_id:
                    raise InvalidOperationError("Username or email already exists")
                data["username"] = new_username
            if email is not None:
                with invalid_input():
                    new_email = Email(email)
                existing = await self.user_repository.find_by_email(new_email)
                if existing and existing.id != user_id:
                    raise InvalidOperationError("Username or email already exists")
                data["email"] = new_email
            if bio is not None:
                data["bio"] = bio
            if avatar_url is not None:
                data["avatar_url"] = avatar_url
            data["updated_at"] = datetime.now()

            with invalid_input():
                updated = User(**data)
            saved = await self.user_repository.save(updated)
            logfire.info("User profile updated", user_id=str(user_id))
            return saved
