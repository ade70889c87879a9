"""Domain value objects for the Q&A core."""

from qna.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
)
from qna.domain.value.types import (
    Actor,
    NotificationType,
    Pagination,
    QuestionSortOrder,
    TagName,
    UserRole,
    VotableType,
    VoteTally,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "NotificationId",
    # Types
    "Actor",
    "NotificationType",
    "Pagination",
    "QuestionSortOrder",
    "TagName",
    "UserRole",
    "VotableType",
    "VoteTally",
    "VoteType",
]
