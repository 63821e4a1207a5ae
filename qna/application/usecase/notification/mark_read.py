"""Mark notifications read use cases."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import NotificationService, UserService
from qna.domain.value import NotificationId, UserId

from .list_notifications import NotificationItem, notification_item


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str
    user_id: str  # From authenticated user


class MarkNotificationReadUseCase:
    """Use case for marking one notification read."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationItem:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another user
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        senders = await self.user_service.get_users([notification.sender_id])
        return notification_item(notification, senders)


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    user_id: str  # From authenticated user


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated: int


class MarkAllNotificationsReadUseCase:
    """Use case for marking every unread notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark all notifications read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllNotificationsReadResponse(updated=updated)
