"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from qna.application.usecase.common import (
    AuthorSummary,
    PageRequest,
    Pagination,
    author_summary,
)
from qna.domain.model import Notification, User
from qna.domain.service import NotificationService, UserService
from qna.domain.value import NotificationFilter, NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification as shown to its recipient."""

    id: str
    type: NotificationType
    title: str
    message: str
    sender: AuthorSummary
    related_question_id: str | None
    related_answer_id: str | None
    is_read: bool
    link: str
    created_at: datetime


def notification_item(
    notification: Notification, users: dict[UserId, User]
) -> NotificationItem:
    return NotificationItem(
        id=str(notification.id),
        type=notification.type,
        title=notification.title,
        message=notification.message,
        sender=author_summary(notification.sender_id, users),
        related_question_id=str(notification.related_question_id)
        if notification.related_question_id
        else None,
        related_answer_id=str(notification.related_answer_id)
        if notification.related_answer_id
        else None,
        is_read=notification.is_read,
        link=notification.link,
        created_at=notification.created_at,
    )


class ListNotificationsRequest(PageRequest):
    """List notifications request."""

    user_id: str  # From authenticated user
    filter: NotificationFilter = NotificationFilter.ALL
    limit: int = Field(default=20, ge=1, le=100)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int
    pagination: Pagination


class ListNotificationsUseCase:
    """Use case for the signed-in user's notifications, newest first."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications, total, unread = (
            await self.notification_service.list_notifications(
                UserId(UUID(request.user_id)),
                read_filter=request.filter,
                limit=request.limit,
                offset=request.offset,
            )
        )
        senders = await self.user_service.get_users(
            [n.sender_id for n in notifications]
        )
        return ListNotificationsResponse(
            notifications=[notification_item(n, senders) for n in notifications],
            unread_count=unread,
            pagination=Pagination.build(request.page, request.limit, total),
        )
