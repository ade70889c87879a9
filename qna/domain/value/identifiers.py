"""Strongly typed identifiers for Q&A domain entities.

NewType keeps question, answer and comment IDs from being mixed up even
though they are all UUIDs underneath.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
