"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotAuthorizedError, NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from qna.domain.service import AnswerService
from qna.domain.value import AnswerId, AnswerSortOrder, QuestionId, UserId
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateAnswer:
    """Tests for create_answer."""

    @pytest.mark.asyncio
    async def test_create_increments_answer_count_and_notifies(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("asker")
        helper = make_user("helper")
        question = await question_repo.save(make_question(asker.id))

        # Act
        answer = await answer_service.create_answer(
            question.id, helper, "  Use the built-in sorted() function.  "
        )

        # Assert
        assert answer.content == "Use the built-in sorted() function."
        assert answer.score == 0
        assert not answer.is_accepted
        assert (await question_repo.find_by_id(question.id)).answer_count == 1
        assert await notification_repo.count_for_recipient(asker.id) == 1

    @pytest.mark.asyncio
    async def test_answer_on_missing_question_raises_not_found(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Question not found"):
            await answer_service.create_answer(
                QuestionId(uuid4()), make_user(), "A perfectly fine answer."
            )


class TestListAnswers:
    """Tests for list_answers ordering."""

    @pytest.mark.asyncio
    async def test_accepted_answer_listed_first(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        low = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        high = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        await answer_repo.mark_accepted(question.id, low.id)

        # Act
        answers, total = await answer_service.list_answers(
            question.id, sort=AnswerSortOrder.NEWEST, accepted_first=True
        )

        # Assert
        assert total == 2
        assert [a.id for a in answers] == [low.id, high.id]


class TestEditAndDelete:
    """Tests for edit_answer and delete_answer."""

    @pytest.mark.asyncio
    async def test_only_author_can_edit(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await answer_service.edit_answer(
                answer.id, UserId(uuid4()), "Some replacement content"
            )

        edited = await answer_service.edit_answer(
            answer.id, answer.author_id, "Some replacement content"
        )
        assert edited.content == "Some replacement content"

    @pytest.mark.asyncio
    async def test_delete_decrements_answer_count(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        helper = make_user("helper")
        question = await question_repo.save(make_question(UserId(uuid4())))
        answer = await answer_service.create_answer(
            question.id, helper, "First attempt at an answer."
        )

        # Act
        await answer_service.delete_answer(answer.id, helper.id)

        # Assert
        assert (await question_repo.find_by_id(question.id)).answer_count == 0
        with pytest.raises(NotFoundError):
            await answer_service.get_answer(answer.id)

    @pytest.mark.asyncio
    async def test_delete_missing_answer_raises_not_found(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        with pytest.raises(NotFoundError):
            await answer_service.delete_answer(AnswerId(uuid4()), UserId(uuid4()))


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_comment_appended_and_author_notified(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        helper = make_user("helper")
        commenter = make_user("commenter")
        question = await question_repo.save(make_question(UserId(uuid4())))
        answer = await answer_service.create_answer(
            question.id, helper, "Use a generator expression."
        )

        # Act
        updated, comment = await answer_service.add_comment(
            answer.id, commenter, "Could you show an example?"
        )

        # Assert
        assert [c.id for c in updated.comments] == [comment.id]
        assert comment.author_id == commenter.id
        assert await notification_repo.count_for_recipient(helper.id) == 1
