"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Select, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import NotificationFilter, NotificationId, UserId
from qna.persistence.mappers import notification_to_dict, row_to_notification
from qna.persistence.tables import notifications_table


def _apply_filter(stmt: Select, read_filter: NotificationFilter) -> Select:
    if read_filter == NotificationFilter.UNREAD:
        return stmt.where(notifications_table.c.is_read.is_(False))
    if read_filter == NotificationFilter.READ:
        return stmt.where(notifications_table.c.is_read.is_(True))
    return stmt


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert inside a SAVEPOINT.

        A failed insert rolls back to the savepoint only, leaving the rest of
        the request transaction usable.
        """
        with logfire.span(
            "notification_repository.save",
            recipient_id=str(notification.recipient_id),
            type=notification.type.value,
        ):
            async with self.session.begin_nested():
                stmt = insert(notifications_table).values(
                    **notification_to_dict(notification)
                )
                await self.session.execute(stmt)
            return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_for_recipient(
        self,
        recipient_id: UserId,
        read_filter: NotificationFilter = NotificationFilter.ALL,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        stmt = (
            _apply_filter(stmt, read_filter)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_for_recipient(
        self,
        recipient_id: UserId,
        read_filter: NotificationFilter = NotificationFilter.ALL,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
        )
        result = await self.session.execute(_apply_filter(stmt, read_filter))
        return result.scalar() or 0

    async def mark_read(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(is_read=True, updated_at=datetime.now())
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_notification(dict(row)) if row else None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
            )
            .values(is_read=True, updated_at=datetime.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> bool:
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
