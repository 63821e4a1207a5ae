"""Get user votes use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.error import ValidationError
from qna.domain.service import VoteService
from qna.domain.value import AnswerId, QuestionId, TargetType, UserId, VoteDirection


class GetUserVotesRequest(BaseModel):
    """Get user votes request."""

    user_id: str  # From authenticated user
    question_id: str | None = None
    answer_id: str | None = None


class GetUserVotesResponse(BaseModel):
    """The caller's current vote on each requested target."""

    question_vote: VoteDirection | None = None
    answer_vote: VoteDirection | None = None


class GetUserVotesUseCase:
    """Use case for looking up the caller's own votes."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get user votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetUserVotesRequest) -> GetUserVotesResponse:
        """Execute get user votes flow.

        Raises:
            ValidationError: If neither target is given
            NotFoundError: If a requested target does not exist
        """
        if request.question_id is None and request.answer_id is None:
            raise ValidationError("question_id or answer_id is required")

        votes = await self.vote_service.get_user_votes(
            UserId(UUID(request.user_id)),
            question_id=QuestionId(UUID(request.question_id))
            if request.question_id
            else None,
            answer_id=AnswerId(UUID(request.answer_id)) if request.answer_id else None,
        )
        return GetUserVotesResponse(
            question_vote=votes.get(TargetType.QUESTION),
            answer_vote=votes.get(TargetType.ANSWER),
        )
