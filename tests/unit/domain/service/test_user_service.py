"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from qna.domain.error import InvalidOperationError, NotFoundError
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.service import AcceptanceService, UserService, VoteService
from qna.domain.value import TargetType, UserId, VoteDirection
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLookup:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_by_username(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("carol"))

        # Act
        found = await user_service.get_by_username("carol")

        # Assert
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_unknown_or_malformed_username_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)
        with pytest.raises(NotFoundError):
            await user_service.get_by_username("nobody")
        with pytest.raises(NotFoundError):
            await user_service.get_by_username("x")

    @pytest.mark.asyncio
    async def test_get_users_skips_unknown_ids(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("dave"))

        # Act
        users = await user_service.get_users([user.id, UserId(uuid4()), user.id])

        # Assert
        assert list(users) == [user.id]


class TestStats:
    """Tests for get_stats and reputation."""

    @pytest.mark.asyncio
    async def test_reputation_sums_question_and_answer_scores(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        vote_service = await unit_env.get(VoteService)
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        author = UserId(uuid4())
        asker = UserId(uuid4())
        voters = [UserId(uuid4()) for _ in range(3)]

        own_question = await question_repo.save(make_question(author))
        other_question = await question_repo.save(make_question(asker))
        answer = await answer_repo.save(make_answer(other_question.id, author))

        for voter in voters:
            await vote_service.apply_vote(
                answer.id, TargetType.ANSWER, voter, VoteDirection.UP
            )
        await vote_service.apply_vote(
            own_question.id, TargetType.QUESTION, voters[0], VoteDirection.DOWN
        )
        await acceptance_service.accept_answer(other_question.id, answer.id, asker)

        # Act
        stats = await user_service.get_stats(author)

        # Assert
        assert stats.questions.count == 1
        assert stats.questions.total_score == -1
        assert stats.answers.count == 1
        assert stats.answers.total_score == 3
        assert stats.answers.accepted == 1
        assert stats.reputation == 2


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_update_bio_and_username(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("erin"))

        # Act
        updated = await user_service.update_profile(
            user.id, username="erin_b", bio="Backend developer"
        )

        # Assert
        assert updated.username.root == "erin_b"
        assert updated.bio == "Backend developer"
        assert updated.email == user.email

    @pytest.mark.asyncio
    async def test_taken_username_rejected(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("frank"))
        user = await user_repo.save(make_user("grace"))

        # Act & Assert
        with pytest.raises(InvalidOperationError):
            await user_service.update_profile(user.id, username="frank")
