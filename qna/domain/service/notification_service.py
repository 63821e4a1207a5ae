"""Notification domain service."""

from uuid import uuid4

import logfire

from qna.domain.error import NotAuthorizedError, NotFoundError
from qna.domain.model import Answer, AnswerComment, Notification, Question, User
from qna.domain.repository import NotificationRepository
from qna.domain.value import (
    NotificationFilter,
    NotificationId,
    NotificationType,
    UserId,
)

from .base import Service


def question_link(question: Question) -> str:
    return f"/questions/{question.id}"


class NotificationService(Service):
    """Domain service for creating and reading notifications.

    Emitting is best-effort: a failed insert is logged and reported as None,
    never raised, so the answer or comment that triggered it still commits.
    Nobody is notified about their own actions.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def on_answer_created(
        self, question: Question, answer: Answer, answering_user: User
    ) -> Notification | None:
        """Tell the question author that their question was answered.

        Args:
            question: The answered question
            answer: The new answer
            answering_user: Author of the answer

        Returns:
            The notification, or None if none was sent or the insert failed
        """
        if answering_user.id == question.author_id:
            return None

        return await self._emit(
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=question.author_id,
                sender_id=answering_user.id,
                type=NotificationType.ANSWER,
                title="New answer to your question",
                message=(
                    f'{answering_user.username} answered your question: '
                    f'"{question.title}"'
                ),
                related_question_id=question.id,
                related_answer_id=answer.id,
                link=question_link(question),
            )
        )

    async def on_answer_accepted(
        self, question: Question, answer: Answer, accepting_user_id: UserId
    ) -> Notification | None:
        """Tell an answer's author that it was accepted."""
        if accepting_user_id == answer.author_id:
            return None

        return await self._emit(
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=answer.author_id,
                sender_id=accepting_user_id,
                type=NotificationType.ACCEPT,
                title="Your answer was accepted",
                message=f'Your answer to "{question.title}" was accepted',
                related_question_id=question.id,
                related_answer_id=answer.id,
                link=question_link(question),
            )
        )

    async def on_comment_added(
        self, answer: Answer, comment: AnswerComment, commenting_user: User
    ) -> Notification | None:
        """Tell an answer's author about a new comment on it."""
        if commenting_user.id == answer.author_id:
            return None

        excerpt = comment.content
        if len(excerpt) > 100:
            excerpt = excerpt[:97] + "..."

        return await self._emit(
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=answer.author_id,
                sender_id=commenting_user.id,
                type=NotificationType.COMMENT,
                title="New comment on your answer",
                message=(
                    f'{commenting_user.username} commented on your answer: '
                    f'"{excerpt}"'
                ),
                related_question_id=answer.question_id,
                related_answer_id=answer.id,
                link=f"/questions/{answer.question_id}",
            )
        )

    async def _emit(self, notification: Notification) -> Notification | None:
        with logfire.span(
            "notification_service.emit",
            type=notification.type.value,
            recipient_id=str(notification.recipient_id),
        ):
            try:
                saved = await self.notification_repository.save(notification)
            except Exception as e:
                logfire.error(
                    "Failed to create notification",
                    type=notification.type.value,
                    recipient_id=str(notification.recipient_id),
                    error=str(e),
                    _exc_info=True,
                )
                return None

            logfire.info("Notification created", notification_id=str(saved.id))
            return saved

    async def list_notifications(
        self,
        recipient_id: UserId,
        read_filter: NotificationFilter = NotificationFilter.ALL,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Notification], int, int]:
        """List a user's notifications.

        Returns:
            The page of notifications, the total matching the filter and the
            user's unread count
        """
        with logfire.span(
            "notification_service.list_notifications",
            recipient_id=str(recipient_id),
            read_filter=read_filter.value,
        ):
            notifications = await self.notification_repository.find_for_recipient(
                recipient_id, read_filter=read_filter, limit=limit, offset=offset
            )
            total = await self.notification_repository.count_for_recipient(
                recipient_id, read_filter=read_filter
            )
            unread = await self.notification_repository.count_for_recipient(
                recipient_id, read_filter=NotificationFilter.UNREAD
            )
            return notifications, total, unread

    async def mark_read(
        self, notification_id: NotificationId, requester_id: UserId
    ) -> Notification:
        """Mark one of the requester's notifications as read.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to someone else
        """
        await self._get_owned(notification_id, requester_id, action="read")
        updated = await self.notification_repository.mark_read(notification_id)
        if updated is None:
            raise NotFoundError("Notification", str(notification_id))
        return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            changed = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info("Notifications marked read", count=changed)
            return changed

    async def delete(
        self, notification_id: NotificationId, requester_id: UserId
    ) -> None:
        """Delete one of the requester's notifications."""
        await self._get_owned(notification_id, requester_id, action="delete")
        await self.notification_repository.delete(notification_id)
        logfire.info("Notification deleted", notification_id=str(notification_id))

    async def _get_owned(
        self, notification_id: NotificationId, requester_id: UserId, action: str
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Notification", str(notification_id))
        if notification.recipient_id != requester_id:
            raise NotAuthorizedError(
                "notification", str(notification_id), str(requester_id), action=action
            )
        return notification
