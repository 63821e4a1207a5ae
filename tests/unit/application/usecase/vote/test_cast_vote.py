"""Unit tests for vote use cases."""

from uuid import uuid4

import pytest

from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetUserVotesRequest,
    GetUserVotesUseCase,
)
from qna.domain.error import ValidationError
from qna.domain.repository import QuestionRepository
from qna.domain.value import TargetType, UserId, VoteAction, VoteDirection
from tests.conftest import make_question
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_then_toggle_off(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        request = CastVoteRequest(
            target_id=str(question.id),
            target_type=TargetType.QUESTION,
            vote_type=VoteDirection.UP,
            user_id=str(uuid4()),
        )

        # Act
        added = await use_case.execute(request)
        removed = await use_case.execute(request)

        # Assert
        assert added.score == 1
        assert added.user_vote == VoteDirection.UP
        assert added.action == VoteAction.ADDED
        assert removed.score == 0
        assert removed.user_vote is None
        assert removed.action == VoteAction.REMOVED
        assert removed.target_id == str(question.id)


class TestGetUserVotesUseCase:
    """Tests for GetUserVotesUseCase."""

    @pytest.mark.asyncio
    async def test_requires_a_target(self, unit_env):
        use_case = await unit_env.get(GetUserVotesUseCase)
        with pytest.raises(ValidationError):
            await use_case.execute(GetUserVotesRequest(user_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_returns_current_vote(self, unit_env):
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        use_case = await unit_env.get(GetUserVotesUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        voter = str(uuid4())
        await cast_vote.execute(
            CastVoteRequest(
                target_id=str(question.id),
                target_type=TargetType.QUESTION,
                vote_type=VoteDirection.DOWN,
                user_id=voter,
            )
        )

        # Act
        result = await use_case.execute(
            GetUserVotesRequest(user_id=voter, question_id=str(question.id))
        )

        # Assert
        assert result.question_vote == VoteDirection.DOWN
        assert result.answer_vote is None
