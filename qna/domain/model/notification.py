"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel, utcnow
from qna.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Notification addressed to one recipient.

    Only the read flag ever changes after creation.
    """

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    message: str = Field(min_length=1, max_length=500)
    related_question_id: Optional[QuestionId] = None
    related_answer_id: Optional[AnswerId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=utcnow)
