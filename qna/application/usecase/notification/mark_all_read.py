"""Mark all notifications read use case."""

from pydantic import BaseModel

from qna.domain.service import NotificationService
from qna.domain.value import Actor


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    actor: Actor


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated: int  # Notifications that went from unread to read


class MarkAllNotificationsReadUseCase:
    """Use case for clearing the caller's unread notifications in one update."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        updated = await self.notification_service.mark_all_read(request.actor.user_id)
        return MarkAllNotificationsReadResponse(updated=updated)
