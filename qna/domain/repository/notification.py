"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model.notification import Notification
from qna.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Whether to skip notifications already read
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of unread notifications
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification.

        A failed insert must leave the caller's surrounding transaction
        usable, since notification delivery is best-effort.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set the read flag on one notification (idempotent).

        Args:
            notification_id: The notification ID
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set the read flag on all of a recipient's unread notifications.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of notifications that changed from unread to read
        """
        pass
