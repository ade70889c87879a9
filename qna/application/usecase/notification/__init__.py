"""Notification use cases."""

from .count_unread import (
    CountUnreadNotificationsRequest,
    CountUnreadNotificationsResponse,
    CountUnreadNotificationsUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .mark_all_read import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
)
from .mark_read import (
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)

__all__ = [
    "CountUnreadNotificationsRequest",
    "CountUnreadNotificationsResponse",
    "CountUnreadNotificationsUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadRequest",
    "MarkAllNotificationsReadResponse",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadResponse",
    "MarkNotificationReadUseCase",
    "NotificationItem",
]
