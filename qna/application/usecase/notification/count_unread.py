"""Count unread notifications use case."""

from pydantic import BaseModel

from qna.domain.service import NotificationService
from qna.domain.value import Actor


class CountUnreadNotificationsRequest(BaseModel):
    actor: Actor


class CountUnreadNotificationsResponse(BaseModel):
    unread_count: int


class CountUnreadNotificationsUseCase:
    """Use case for the unread badge count."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: CountUnreadNotificationsRequest
    ) -> CountUnreadNotificationsResponse:
        count = await self.notification_service.count_unread(request.actor.user_id)
        return CountUnreadNotificationsResponse(unread_count=count)
