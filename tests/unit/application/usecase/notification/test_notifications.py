"""Unit tests for the notification use cases."""

from uuid import uuid4

import pytest

from qna.application.usecase.notification import (
    CountUnreadNotificationsRequest,
    CountUnreadNotificationsUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import NotificationId, NotificationType
from tests.conftest import actor_for, at, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env, recipient, count: int):
    repo = await unit_env.get(NotificationRepository)
    sender = make_user("sender")
    return [
        await repo.save(
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient.id,
                sender_id=sender.id,
                type=NotificationType.ANSWER,
                message=f"sender answered your question: Q{i}",
                created_at=at(i),
            )
        )
        for i in range(count)
    ]


class TestListNotificationsUseCase:
    """Tests for ListNotificationsUseCase."""

    @pytest.mark.asyncio
    async def test_newest_first_with_unread_count(self, unit_env):
        """Notifications come newest first with the unread total."""
        use_case = await unit_env.get(ListNotificationsUseCase)
        recipient = make_user("recipient")
        seeded = await _seed(unit_env, recipient, 3)

        response = await use_case.execute(
            ListNotificationsRequest(actor=actor_for(recipient), limit=2)
        )

        assert [n.notification_id for n in response.notifications] == [
            str(seeded[2].id),
            str(seeded[1].id),
        ]
        assert response.unread_count == 3


class TestReadStateUseCases:
    """Tests for the mark-read and count use cases."""

    @pytest.mark.asyncio
    async def test_mark_read_then_count(self, unit_env):
        """Marking one read leaves the others unread."""
        mark_read = await unit_env.get(MarkNotificationReadUseCase)
        count = await unit_env.get(CountUnreadNotificationsUseCase)
        recipient = make_user("recipient")
        seeded = await _seed(unit_env, recipient, 2)

        response = await mark_read.execute(
            MarkNotificationReadRequest(
                notification_id=str(seeded[0].id), actor=actor_for(recipient)
            )
        )
        unread = await count.execute(
            CountUnreadNotificationsRequest(actor=actor_for(recipient))
        )

        assert response.is_read is True
        assert unread.unread_count == 1

    @pytest.mark.asyncio
    async def test_mark_read_requires_recipient(self, unit_env):
        """Other users' notifications look missing."""
        mark_read = await unit_env.get(MarkNotificationReadUseCase)
        seeded = await _seed(unit_env, make_user("recipient"), 1)

        with pytest.raises(NotFoundError):
            await mark_read.execute(
                MarkNotificationReadRequest(
                    notification_id=str(seeded[0].id),
                    actor=actor_for(make_user("snoop")),
                )
            )

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        """All unread notifications of the caller are marked."""
        mark_all = await unit_env.get(MarkAllNotificationsReadUseCase)
        recipient = make_user("recipient")
        other = make_user("other")
        await _seed(unit_env, recipient, 3)
        await _seed(unit_env, other, 1)

        response = await mark_all.execute(
            MarkAllNotificationsReadRequest(actor=actor_for(recipient))
        )

        assert response.updated == 3
        repo = await unit_env.get(NotificationRepository)
        assert await repo.count_unread(other.id) == 1
