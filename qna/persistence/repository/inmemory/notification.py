"""In-memory notification repository for testing."""

from datetime import datetime
from typing import List, Optional

from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import NotificationFilter, NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _for_recipient(
        self, recipient_id: UserId, read_filter: NotificationFilter
    ) -> List[Notification]:
        notifications = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        if read_filter == NotificationFilter.UNREAD:
            notifications = [n for n in notifications if not n.is_read]
        elif read_filter == NotificationFilter.READ:
            notifications = [n for n in notifications if n.is_read]
        return notifications

    async def save(self, notification: Notification) -> Notification:
        self._notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        return self._notifications.get(notification_id)

    async def find_for_recipient(
        self,
        recipient_id: UserId,
        read_filter: NotificationFilter = NotificationFilter.ALL,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        notifications = self._for_recipient(recipient_id, read_filter)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_for_recipient(
        self,
        recipient_id: UserId,
        read_filter: NotificationFilter = NotificationFilter.ALL,
    ) -> int:
        return len(self._for_recipient(recipient_id, read_filter))

    async def mark_read(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        notification = self._notifications.get(notification_id)
        if notification is None:
            return None
        updated = notification.model_copy(
            update={"is_read": True, "updated_at": datetime.now()}
        )
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        unread = self._for_recipient(recipient_id, NotificationFilter.UNREAD)
        for notification in unread:
            await self.mark_read(notification.id)
        return len(unread)

    async def delete(self, notification_id: NotificationId) -> bool:
        return self._notifications.pop(notification_id, None) is not None
