"""Get user profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from qna.domain.service import UserService
from qna.domain.value import UserRole


class UserStatsInfo(BaseModel):
    """Activity numbers shown on a profile."""

    questions_asked: int
    answers_given: int
    accepted_answers: int
    question_score: int
    answer_score: int


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str


class GetUserProfileResponse(BaseModel):
    """Public user profile."""

    user_id: str
    username: str
    role: UserRole
    avatar_url: str | None
    bio: str | None
    reputation: int
    stats: UserStatsInfo
    created_at: datetime


class GetUserProfileUseCase:
    """Use case for getting a user's public profile.

    Reputation is computed on every call from the user's question and
    answer scores.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("get_user_profile.execute", username=request.username):
            user = await self.user_service.get_by_username(request.username)
            stats = await self.user_service.get_stats(user.id)

            return GetUserProfileResponse(
                user_id=str(user.id),
                username=user.username.root,
                role=user.role,
                avatar_url=user.avatar_url,
                bio=user.bio,
                reputation=stats.reputation,
                stats=UserStatsInfo(
                    questions_asked=stats.questions.count,
                    answers_given=stats.answers.count,
                    accepted_answers=stats.answers.accepted,
                    question_score=stats.questions.total_score,
                    answer_score=stats.answers.total_score,
                ),
                created_at=user.created_at,
            )
