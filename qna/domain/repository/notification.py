"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model import Notification
from qna.domain.value import NotificationFilter, NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Implementations isolate the write (for example in a savepoint) so that
        a failure here leaves the caller's surrounding work intact.

        Args:
            notification: The notification to store

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        pass

    @abstractmethod
    async def find_for_recipient(
        self,
        recipient_id: UserId,
        read_filter: NotificationFilter = NotificationFilter.ALL,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Recipient user
            read_filter: All, unread only or read only
            limit: Maximum number of notifications
            offset: Number to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_for_recipient(
        self,
        recipient_id: UserId,
        read_filter: NotificationFilter = NotificationFilter.ALL,
    ) -> int:
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Set is_read on one notification.

        Returns:
            The updated notification, or None if it does not exist
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set is_read on all of a recipient's unread notifications.

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        pass
