"""Unit tests for notification use cases."""

import pytest

from qna.application.usecase.answer import CreateAnswerRequest, CreateAnswerUseCase
from qna.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadUseCase,
)
from qna.domain.repository import QuestionRepository, UserRepository
from qna.domain.value import NotificationFilter, NotificationType
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListNotificationsUseCase:
    """Tests for listing and marking notifications."""

    @pytest.mark.asyncio
    async def test_answer_shows_up_for_question_author(self, unit_env):
        # Arrange
        create_answer = await unit_env.get(CreateAnswerUseCase)
        list_notifications = await unit_env.get(ListNotificationsUseCase)
        mark_all = await unit_env.get(MarkAllNotificationsReadUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        asker = await user_repo.save(make_user("asker"))
        helper = await user_repo.save(make_user("helper"))
        question = await question_repo.save(make_question(asker.id))
        await create_answer.execute(
            CreateAnswerRequest(
                question_id=str(question.id),
                user_id=str(helper.id),
                content="Have you tried turning it off and on?",
            )
        )

        # Act
        before = await list_notifications.execute(
            ListNotificationsRequest(user_id=str(asker.id))
        )
        marked = await mark_all.execute(
            MarkAllNotificationsReadRequest(user_id=str(asker.id))
        )
        unread_after = await list_notifications.execute(
            ListNotificationsRequest(
                user_id=str(asker.id), filter=NotificationFilter.UNREAD
            )
        )

        # Assert
        assert before.unread_count == 1
        assert before.pagination.total == 1
        notification = before.notifications[0]
        assert notification.type == NotificationType.ANSWER
        assert notification.sender.username == "helper"
        assert notification.related_question_id == str(question.id)
        assert marked.updated == 1
        assert unread_after.notifications == []
        assert unread_after.unread_count == 0
