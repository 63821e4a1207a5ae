"""Vote domain service."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import logfire

from qna.domain.error import InvalidOperationError, NotFoundError
from qna.domain.model import cast_vote
from qna.domain.model.vote import Votable
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    TargetType,
    UserId,
    VoteAction,
    VoteDirection,
)

from .base import Service


@dataclass
class VoteResult:
    """Outcome of a vote request."""

    target_id: UUID
    target_type: TargetType
    score: int
    direction: Optional[VoteDirection]
    action: VoteAction


class VoteService(Service):
    """Domain service for voting on questions and answers.

    Each voter holds at most one vote per target. Repeating a vote removes
    it and voting the other way flips it. The ledger and the cached score
    are written by a single repository call while the target row is locked.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def apply_vote(
        self,
        target_id: UUID,
        target_type: TargetType,
        voter_id: UserId,
        direction: VoteDirection,
    ) -> VoteResult:
        """Cast, toggle off or switch a vote.

        Args:
            target_id: Question or answer ID
            target_type: Whether target_id is a question or an answer
            voter_id: User casting the vote
            direction: Requested direction

        Returns:
            New score and the voter's resulting direction

        Raises:
            NotFoundError: If the target does not exist
            InvalidOperationError: If the voter authored the target
        """
        with logfire.span(
            "vote_service.apply_vote",
            target_id=str(target_id),
            target_type=target_type.value,
            voter_id=str(voter_id),
            direction=direction.value,
        ):
            target = await self._lock_target(target_id, target_type)
            if target is None:
                logfire.warn(
                    "Vote on non-existent target",
                    target_id=str(target_id),
                    target_type=target_type.value,
                )
                raise NotFoundError(target_type.value.capitalize(), str(target_id))

            if target.author_id == voter_id:
                logfire.warn(
                    "Self-vote attempt",
                    target_id=str(target_id),
                    voter_id=str(voter_id),
                )
                raise InvalidOperationError("You cannot vote on your own content")

            change = cast_vote(target.votes, voter_id, direction)

            if target_type == TargetType.QUESTION:
                score = await self.question_repository.save_votes(
                    QuestionId(target_id), change.votes, change.delta
                )
            else:
                score = await self.answer_repository.save_votes(
                    AnswerId(target_id), change.votes, change.delta
                )

            logfire.info(
                "Vote applied",
                target_id=str(target_id),
                action=change.action.value,
                delta=change.delta,
                score=score,
            )

            return VoteResult(
                target_id=target_id,
                target_type=target_type,
                score=score,
                direction=change.direction,
                action=change.action,
            )

    async def get_user_votes(
        self,
        voter_id: UserId,
        question_id: Optional[QuestionId] = None,
        answer_id: Optional[AnswerId] = None,
    ) -> dict[TargetType, Optional[VoteDirection]]:
        """Look up a user's current direction on a question and/or answer.

        Targets that were not asked for are left out of the result; targets
        that were asked for but do not exist raise NotFoundError.
        """
        votes: dict[TargetType, Optional[VoteDirection]] = {}

        if question_id is not None:
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))
            votes[TargetType.QUESTION] = question.direction_of(voter_id)

        if answer_id is not None:
            answer = await self.answer_repository.find_by_id(answer_id)
            if answer is None:
                raise NotFoundError("Answer", str(answer_id))
            votes[TargetType.ANSWER] = answer.direction_of(voter_id)

        return votes

    async def _lock_target(
        self, target_id: UUID, target_type: TargetType
    ) -> Optional[Votable]:
        if target_type == TargetType.QUESTION:
            return await self.question_repository.find_by_id(
                QuestionId(target_id), for_update=True
            )
        return await self.answer_repository.find_by_id(
            AnswerId(target_id), for_update=True
        )
