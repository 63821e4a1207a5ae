"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
)
from qna.domain.value import TargetType, VoteDirection
from qna.interface.api.dependencies import require_user

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting."""

    target_id: UUID
    target_type: TargetType
    vote_type: VoteDirection


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote on a question or answer.

    Voting the same way twice removes the vote; voting the other way
    switches it.

    Example:
        POST /votes
        {"target_id": "...", "target_type": "answer", "vote_type": "upvote"}

        Response:
        {"target_id": "...", "target_type": "answer", "score": 1,
         "user_vote": "upvote", "action": "added"}
    """
    user = await require_user(get_current_user_use_case, authorization)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            target_id=str(request.target_id),
            target_type=request.target_type,
            vote_type=request.vote_type,
            user_id=user.user_id,
        )
    )


@router.get("", response_model=GetUserVotesResponse)
async def get_user_votes(
    get_user_votes_use_case: FromDishka[GetUserVotesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    question_id: UUID | None = None,
    answer_id: UUID | None = None,
    authorization: str | None = Header(default=None),
) -> GetUserVotesResponse:
    """Get the caller's current vote on a question and/or answer."""
    user = await require_user(get_current_user_use_case, authorization)
    return await get_user_votes_use_case.execute(
        GetUserVotesRequest(
            user_id=user.user_id,
            question_id=str(question_id) if question_id else None,
            answer_id=str(answer_id) if answer_id else None,
        )
    )
