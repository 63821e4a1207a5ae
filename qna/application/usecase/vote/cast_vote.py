"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import VoteService
from qna.domain.value import TargetType, UserId, VoteAction, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_id: str
    target_type: TargetType
    vote_type: VoteDirection
    user_id: str  # From authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``user_vote`` is the caller's direction after the request, or None when
    the request toggled their vote off.
    """

    target_id: str
    target_type: TargetType
    score: int
    user_vote: VoteDirection | None
    action: VoteAction


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the target does not exist
            InvalidOperationError: If the user votes on their own content
        """
        result = await self.vote_service.apply_vote(
            UUID(request.target_id),
            request.target_type,
            UserId(UUID(request.user_id)),
            request.vote_type,
        )
        return CastVoteResponse(
            target_id=str(result.target_id),
            target_type=result.target_type,
            score=result.score,
            user_vote=result.direction,
            action=result.action,
        )
