"""In-memory notification repository for testing."""

from typing import List, Optional

from qna.domain.model.notification import Notification
from qna.domain.repository.notification import NotificationRepository
from qna.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        notifications = [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set is_read on one notification."""
        notification = self._notifications.get(notification_id)
        if notification:
            self._notifications[notification_id] = notification.model_copy(
                update={"is_read": True}
            )

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set is_read on all of a recipient's unread notifications."""
        count = 0
        for notification in list(self._notifications.values()):
            if notification.recipient_id == recipient_id and not notification.is_read:
                self._notifications[notification.id] = notification.model_copy(
                    update={"is_read": True}
                )
                count += 1
        return count
