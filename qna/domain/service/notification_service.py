"""Notification domain service (the notification dispatcher)."""

from typing import List, Optional
from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import Answer, Comment, Notification, Question
from qna.domain.repository import NotificationRepository
from qna.domain.value import Actor, NotificationId, NotificationType, UserId

from .base import Service

MAX_MESSAGE_LENGTH = 500


class NotificationService(Service):
    """Domain service for notifications.

    Notifications are created after the primary write of an answer or
    comment. Delivery is best-effort: a failure is logged and dropped, and
    never fails the operation that triggered it.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_answer_posted(
        self, question: Question, answer: Answer, sender: Actor
    ) -> Optional[Notification]:
        """Tell a question's author that someone answered.

        Args:
            question: The answered question
            answer: The new answer
            sender: The answer's author

        Returns:
            The stored notification, or None if suppressed or delivery failed
        """
        if answer.author_id == question.author_id:
            return None

        return await self._dispatch(
            recipient_id=question.author_id,
            sender_id=answer.author_id,
            type=NotificationType.ANSWER,
            message=f"{sender.username} answered your question: {question.title}",
            related_question_id=question.id,
            related_answer_id=answer.id,
        )

    async def notify_comment_posted(
        self, answer: Answer, comment: Comment, sender: Actor
    ) -> Optional[Notification]:
        """Tell an answer's author that someone commented.

        Args:
            answer: The commented answer
            comment: The new comment
            sender: The comment's author

        Returns:
            The stored notification, or None if suppressed or delivery failed
        """
        if comment.author_id == answer.author_id:
            return None

        return await self._dispatch(
            recipient_id=answer.author_id,
            sender_id=comment.author_id,
            type=NotificationType.COMMENT,
            message=f"{sender.username} commented on your answer",
            related_question_id=answer.question_id,
            related_answer_id=answer.id,
        )

    async def _dispatch(self, **fields) -> Optional[Notification]:
        with logfire.span(
            "notification_service.dispatch",
            type=fields["type"].value,
            recipient_id=str(fields["recipient_id"]),
        ):
            try:
                notification = Notification(
                    id=NotificationId(uuid4()),
                    **{**fields, "message": fields["message"][:MAX_MESSAGE_LENGTH]},
                )
                saved = await self.notification_repository.save(notification)
                logfire.info("Notification sent", notification_id=str(saved.id))
                return saved
            except Exception as e:
                # Best-effort: the triggering write has already succeeded
                logfire.error(
                    "Notification dispatch failed",
                    type=fields["type"].value,
                    recipient_id=str(fields["recipient_id"]),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return None

    async def list_notifications(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """A recipient's notifications, newest first."""
        with logfire.span(
            "notification_service.list_notifications",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            return await self.notification_repository.find_by_recipient(
                recipient_id, unread_only=unread_only, limit=limit, offset=offset
            )

    async def count_unread(self, recipient_id: UserId) -> int:
        """Number of unread notifications for a recipient."""
        return await self.notification_repository.count_unread(recipient_id)

    async def mark_read(
        self, notification_id: NotificationId, actor: Actor
    ) -> Notification:
        """Mark one of the caller's notifications as read.

        Marking an already read notification is a no-op.

        Raises:
            NotFoundError: If the notification is missing or addressed to
                someone else
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(actor.user_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if not notification or notification.recipient_id != actor.user_id:
                logfire.warn(
                    "Notification not found",
                    notification_id=str(notification_id),
                    user_id=str(actor.user_id),
                )
                raise NotFoundError("Notification", str(notification_id))

            if not notification.is_read:
                await self.notification_repository.mark_read(notification_id)
            return notification.model_copy(update={"is_read": True})

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read.

        Returns:
            Number of notifications changed
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            changed = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info(
                "Notifications marked read",
                recipient_id=str(recipient_id),
                count=changed,
            )
            return changed
