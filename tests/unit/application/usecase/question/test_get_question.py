"""Unit tests for question read and list use cases."""

from datetime import datetime
from uuid import uuid4

import pytest

from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.service import VoteService
from qna.domain.value import TargetType, VoteDirection
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_populates_author(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("asker"))

        # Act
        result = await use_case.execute(
            CreateQuestionRequest(
                author_id=str(author.id),
                title="What is a metaclass?",
                description="Every tutorial mentions them but none explain.",
                tags=["Python", "oop"],
            )
        )

        # Assert
        assert result.author.username == "asker"
        assert result.tags == ["python", "oop"]
        assert result.answer_count == 0

    @pytest.mark.asyncio
    async def test_unknown_author_rejected(self, unit_env):
        use_case = await unit_env.get(CreateQuestionUseCase)
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateQuestionRequest(
                    author_id=str(uuid4()),
                    title="What is a metaclass?",
                    description="Every tutorial mentions them but none explain.",
                    tags=["python"],
                )
            )


class TestGetQuestionUseCase:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_accepted_answer_first_then_by_score(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        user_repo = await unit_env.get(UserRepository)

        asker = await user_repo.save(make_user("asker"))
        question = await question_repo.save(make_question(asker.id))
        accepted = await answer_repo.save(
            make_answer(question.id, make_user("one").id)
        )
        popular = await answer_repo.save(make_answer(question.id, make_user("two").id))
        plain = await answer_repo.save(make_answer(question.id, make_user("three").id))
        await vote_service.apply_vote(
            popular.id, TargetType.ANSWER, asker.id, VoteDirection.UP
        )
        await answer_repo.mark_accepted(question.id, accepted.id)

        # Act
        result = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        # Assert
        assert [a.id for a in result.answers] == [
            str(accepted.id),
            str(popular.id),
            str(plain.id),
        ]
        assert result.answers[0].is_accepted
        assert result.answers_pagination.total == 3
        assert result.question.view_count == 1
        assert result.question.author.username == "asker"

    @pytest.mark.asyncio
    async def test_without_answers(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user().id))

        # Act
        result = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id), include_answers=False)
        )

        # Assert
        assert result.answers is None
        assert result.answers_pagination is None
        # Authors that no longer resolve are reported without a username
        assert result.question.author.username is None


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_pagination_block(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user().id
        for minute in range(5):
            await question_repo.save(
                make_question(
                    author,
                    title=f"Question number {minute}",
                    created_at=datetime(2024, 3, 1, 9, minute),
                )
            )

        # Act
        result = await use_case.execute(ListQuestionsRequest(page=2, limit=2))

        # Assert
        assert [q.title for q in result.questions] == [
            "Question number 2",
            "Question number 1",
        ]
        assert result.pagination.total == 5
        assert result.pagination.total_pages == 3
        assert result.pagination.has_next_page
        assert result.pagination.has_prev_page
