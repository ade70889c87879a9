"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import NotificationId, UserId
from qna.persistence.error import store_operation
from qna.persistence.mappers import notification_to_dict, row_to_notification
from qna.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    @store_operation
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))
        stmt = (
            stmt.order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    @store_operation
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @store_operation
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a savepoint.

        A failed insert rolls back to the savepoint only, so the request's
        own writes stay committable.
        """
        with logfire.span(
            "notification_repository.save", notification_id=str(notification.id)
        ):
            async with self.session.begin_nested():
                stmt = insert(notifications_table).values(
                    **notification_to_dict(notification)
                )
                await self.session.execute(stmt)
            return notification

    @store_operation
    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set is_read on one notification."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(is_read=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set is_read on all of a recipient's unread notifications."""
        with logfire.span(
            "notification_repository.mark_all_read", recipient_id=str(recipient_id)
        ):
            stmt = (
                update(notifications_table)
                .where(notifications_table.c.recipient_id == recipient_id)
                .where(notifications_table.c.is_read.is_(False))
                .values(is_read=True)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount or 0
