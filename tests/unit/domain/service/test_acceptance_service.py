"""Unit tests for AcceptanceService."""

from uuid import uuid4

import pytest

from qna.domain.error import InvalidOperationError, NotAuthorizedError, NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from qna.domain.service import AcceptanceService
from qna.domain.value import AnswerId, NotificationType, UserId
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _question_with_answers(unit_env, count: int = 2):
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    asker = UserId(uuid4())
    question = await question_repo.save(make_question(asker))
    answers = [
        await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        for _ in range(count)
    ]
    return asker, question, answers


class TestAcceptAnswer:
    """Tests for accept_answer."""

    @pytest.mark.asyncio
    async def test_accept_marks_only_that_answer(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (first, second) = await _question_with_answers(unit_env)

        # Act
        accepted = await service.accept_answer(question.id, first.id, asker)

        # Assert
        assert accepted.is_accepted
        assert (await answer_repo.find_by_id(first.id)).is_accepted
        assert not (await answer_repo.find_by_id(second.id)).is_accepted

    @pytest.mark.asyncio
    async def test_accepting_another_answer_moves_the_flag(self, unit_env):
        """At most one answer per question is accepted at any time."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (first, second) = await _question_with_answers(unit_env)
        await service.accept_answer(question.id, first.id, asker)

        # Act
        await service.accept_answer(question.id, second.id, asker)

        # Assert
        answers = await answer_repo.find_by_question(question.id)
        assert [a.id for a in answers if a.is_accepted] == [second.id]

    @pytest.mark.asyncio
    async def test_only_question_author_can_accept(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        _, question, (first, _) = await _question_with_answers(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.accept_answer(question.id, first.id, first.author_id)

        assert not (await answer_repo.find_by_id(first.id)).is_accepted

    @pytest.mark.asyncio
    async def test_answer_from_other_question_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        asker, question, _ = await _question_with_answers(unit_env)
        _, _, (foreign,) = await _question_with_answers(unit_env, count=1)

        # Act & Assert
        with pytest.raises(InvalidOperationError, match="does not belong"):
            await service.accept_answer(question.id, foreign.id, asker)

    @pytest.mark.asyncio
    async def test_missing_answer_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        asker, question, _ = await _question_with_answers(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.accept_answer(question.id, AnswerId(uuid4()), asker)

    @pytest.mark.asyncio
    async def test_accept_notifies_answer_author_once(self, unit_env):
        """Re-accepting an accepted answer does not notify again."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, question, (first, _) = await _question_with_answers(unit_env)

        # Act
        await service.accept_answer(question.id, first.id, asker)
        await service.accept_answer(question.id, first.id, asker)

        # Assert
        notifications = await notification_repo.find_for_recipient(first.author_id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.ACCEPT
        assert notifications[0].sender_id == asker
        assert notifications[0].related_answer_id == first.id

    @pytest.mark.asyncio
    async def test_accepting_own_answer_sends_no_notification(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        asker = UserId(uuid4())
        question = await question_repo.save(make_question(asker))
        own = await answer_repo.save(make_answer(question.id, asker))

        # Act
        accepted = await service.accept_answer(question.id, own.id, asker)

        # Assert
        assert accepted.is_accepted
        assert await notification_repo.count_for_recipient(asker) == 0


class TestUnacceptAnswer:
    """Tests for unaccept_answer."""

    @pytest.mark.asyncio
    async def test_unaccept_clears_flag(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (first, _) = await _question_with_answers(unit_env)
        await service.accept_answer(question.id, first.id, asker)

        # Act
        result = await service.unaccept_answer(question.id, first.id, asker)

        # Assert
        assert not result.is_accepted
        answers = await answer_repo.find_by_question(question.id)
        assert not any(a.is_accepted for a in answers)

    @pytest.mark.asyncio
    async def test_unaccept_leaves_other_accepted_answer(self, unit_env):
        """Unaccepting a non-accepted answer changes nothing."""
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (first, second) = await _question_with_answers(unit_env)
        await service.accept_answer(question.id, first.id, asker)

        # Act
        result = await service.unaccept_answer(question.id, second.id, asker)

        # Assert
        assert not result.is_accepted
        assert (await answer_repo.find_by_id(first.id)).is_accepted
