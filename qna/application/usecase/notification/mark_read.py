"""Mark notification read use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import NotificationService
from qna.domain.value import Actor, NotificationId


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str  # UUID string
    actor: Actor  # Must be the recipient


class MarkNotificationReadResponse(BaseModel):
    """Mark notification read response."""

    notification_id: str
    is_read: bool


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read (idempotent)."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification is missing or not the caller's
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)), request.actor
        )
        return MarkNotificationReadResponse(
            notification_id=str(notification.id), is_read=notification.is_read
        )
