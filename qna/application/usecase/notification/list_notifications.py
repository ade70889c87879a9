"""List notifications use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from qna.domain.service import NotificationService
from qna.domain.value import Actor, NotificationType


class NotificationItem(BaseModel):
    """Notification in response."""

    notification_id: str
    sender_id: str
    type: NotificationType
    message: str
    related_question_id: Optional[str]
    related_answer_id: Optional[str]
    is_read: bool
    created_at: datetime


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    actor: Actor
    unread_only: bool = False
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading the caller's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        with logfire.span(
            "list_notifications.execute", user_id=str(request.actor.user_id)
        ):
            notifications = await self.notification_service.list_notifications(
                request.actor.user_id,
                unread_only=request.unread_only,
                limit=request.limit,
                offset=request.offset,
            )
            unread_count = await self.notification_service.count_unread(
                request.actor.user_id
            )

            return ListNotificationsResponse(
                notifications=[
                    NotificationItem(
                        notification_id=str(n.id),
                        sender_id=str(n.sender_id),
                        type=n.type,
                        message=n.message,
                        related_question_id=(
                            str(n.related_question_id)
                            if n.related_question_id
                            else None
                        ),
                        related_answer_id=(
                            str(n.related_answer_id) if n.related_answer_id else None
                        ),
                        is_read=n.is_read,
                        created_at=n.created_at,
                    )
                    for n in notifications
                ],
                unread_count=unread_count,
            )
