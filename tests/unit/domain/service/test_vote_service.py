"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from qna.domain.error import InvalidOperationError, NotFoundError
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.service import VoteService
from qna.domain.value import TargetType, UserId, VoteAction, VoteDirection
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestApplyVote:
    """Tests for apply_vote."""

    @pytest.mark.asyncio
    async def test_toggle_and_switch_on_answer(self, unit_env):
        """Up, up again, then down: scores 1, 0, -1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await question_repo.save(make_question(UserId(uuid4())))
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        voter = UserId(uuid4())

        # Act
        first = await vote_service.apply_vote(
            answer.id, TargetType.ANSWER, voter, VoteDirection.UP
        )
        second = await vote_service.apply_vote(
            answer.id, TargetType.ANSWER, voter, VoteDirection.UP
        )
        third = await vote_service.apply_vote(
            answer.id, TargetType.ANSWER, voter, VoteDirection.DOWN
        )

        # Assert
        assert (first.score, first.action, first.direction) == (
            1,
            VoteAction.ADDED,
            VoteDirection.UP,
        )
        assert (second.score, second.action, second.direction) == (
            0,
            VoteAction.REMOVED,
            None,
        )
        assert (third.score, third.action, third.direction) == (
            -1,
            VoteAction.ADDED,
            VoteDirection.DOWN,
        )

        stored = await answer_repo.find_by_id(answer.id)
        assert stored.score == -1
        assert stored.direction_of(voter) == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_switch_moves_question_score_by_two(self, unit_env):
        """Flipping an upvote to a downvote changes the score by -2."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)

        question = await question_repo.save(make_question(UserId(uuid4())))
        voter = UserId(uuid4())
        other = UserId(uuid4())
        await vote_service.apply_vote(
            question.id, TargetType.QUESTION, other, VoteDirection.UP
        )
        await vote_service.apply_vote(
            question.id, TargetType.QUESTION, voter, VoteDirection.UP
        )

        # Act
        result = await vote_service.apply_vote(
            question.id, TargetType.QUESTION, voter, VoteDirection.DOWN
        )

        # Assert
        assert result.action == VoteAction.SWITCHED
        assert result.score == 0
        stored = await question_repo.find_by_id(question.id)
        assert stored.upvotes == 1
        assert stored.downvotes == 1

    @pytest.mark.asyncio
    async def test_self_vote_rejected_without_changes(self, unit_env):
        """Authors cannot vote on their own content."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)

        author = UserId(uuid4())
        question = await question_repo.save(make_question(author))

        # Act & Assert
        with pytest.raises(InvalidOperationError, match="own content"):
            await vote_service.apply_vote(
                question.id, TargetType.QUESTION, author, VoteDirection.UP
            )

        stored = await question_repo.find_by_id(question.id)
        assert stored.score == 0
        assert stored.votes == []

    @pytest.mark.asyncio
    async def test_vote_on_missing_target_raises_not_found(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.apply_vote(
                uuid4(), TargetType.ANSWER, UserId(uuid4()), VoteDirection.UP
            )


class TestGetUserVotes:
    """Tests for get_user_votes."""

    @pytest.mark.asyncio
    async def test_reports_direction_per_target(self, unit_env):
        """Only requested targets appear; no vote is reported as None."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await question_repo.save(make_question(UserId(uuid4())))
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        voter = UserId(uuid4())
        await vote_service.apply_vote(
            answer.id, TargetType.ANSWER, voter, VoteDirection.DOWN
        )

        # Act
        votes = await vote_service.get_user_votes(
            voter, question_id=question.id, answer_id=answer.id
        )

        # Assert
        assert votes == {
            TargetType.QUESTION: None,
            TargetType.ANSWER: VoteDirection.DOWN,
        }
