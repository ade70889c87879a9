"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from qna.application.usecase.notification import (
    CountUnreadNotificationsRequest,
    CountUnreadNotificationsResponse,
    CountUnreadNotificationsUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)
from qna.interface.api.auth import CurrentActor

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    actor: CurrentActor,
    use_case: FromDishka[ListNotificationsUseCase],
    unread_only: bool = Query(default=False),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first."""
    return await use_case.execute(
        ListNotificationsRequest(
            actor=actor, unread_only=unread_only, limit=limit, offset=offset
        )
    )


@router.get("/unread-count", response_model=CountUnreadNotificationsResponse)
async def count_unread(
    actor: CurrentActor,
    use_case: FromDishka[CountUnreadNotificationsUseCase],
) -> CountUnreadNotificationsResponse:
    """Number of unread notifications for the caller."""
    return await use_case.execute(CountUnreadNotificationsRequest(actor=actor))


@router.patch("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    actor: CurrentActor,
    use_case: FromDishka[MarkAllNotificationsReadUseCase],
) -> MarkAllNotificationsReadResponse:
    """Mark all of the caller's notifications as read."""
    return await use_case.execute(MarkAllNotificationsReadRequest(actor=actor))


@router.patch("/{notification_id}/read", response_model=MarkNotificationReadResponse)
async def mark_read(
    notification_id: UUID,
    actor: CurrentActor,
    use_case: FromDishka[MarkNotificationReadUseCase],
) -> MarkNotificationReadResponse:
    """Mark one of the caller's notifications as read."""
    return await use_case.execute(
        MarkNotificationReadRequest(
            notification_id=str(notification_id), actor=actor
        )
    )
