"""Delete notification use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import NotificationService
from qna.domain.value import NotificationId, UserId


class DeleteNotificationRequest(BaseModel):
    """Delete notification request."""

    notification_id: str
    user_id: str  # From authenticated user


class DeleteNotificationResponse(BaseModel):
    """Delete notification response."""

    notification_id: str
    deleted: bool


class DeleteNotificationUseCase:
    """Use case for deleting one of the user's own notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize delete notification use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationRequest
    ) -> DeleteNotificationResponse:
        await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return DeleteNotificationResponse(
            notification_id=request.notification_id, deleted=True
        )
