"""Mappers between database rows and domain models.

Rows come back from SQLAlchemy Core as plain dicts; these functions turn
them into frozen domain models and back.
"""

from typing import Any, Dict

from qna.domain.model import Answer, Comment, Notification, Question, User, Vote
from qna.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    TagName,
    UserId,
    UserRole,
    VotableType,
    VoteType,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row.get("email"),
        role=UserRole(row["role"]),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        location=row.get("location"),
        website=row.get("website"),
        reputation=row["reputation"],
        questions_asked=row["questions_asked"],
        answers_given=row["answers_given"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(row["id"]),
        title=row["title"],
        description=row["description"],
        tags=[TagName(tag) for tag in row.get("tags") or []],
        author_id=UserId(row["author_id"]),
        views=row["views"],
        accepted_answer_id=(
            AnswerId(row["accepted_answer_id"])
            if row.get("accepted_answer_id")
            else None
        ),
        pinned_answer_id=(
            AnswerId(row["pinned_answer_id"]) if row.get("pinned_answer_id") else None
        ),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Tags serialize to their plain string values.
    """
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(row["id"]),
        question_id=QuestionId(row["question_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        is_accepted=row["is_accepted"],
        is_pinned=row["is_pinned"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        answer_id=AnswerId(row["answer_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        user_id=UserId(row["user_id"]),
        votable_type=VotableType(row["votable_type"]),
        votable_id=row["votable_id"],
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "user_id": vote.user_id,
        "votable_type": vote.votable_type.value,
        "votable_id": vote.votable_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(row["id"]),
        recipient_id=UserId(row["recipient_id"]),
        sender_id=UserId(row["sender_id"]),
        type=NotificationType(row["type"]),
        message=row["message"],
        related_question_id=(
            QuestionId(row["related_question_id"])
            if row.get("related_question_id")
            else None
        ),
        related_answer_id=(
            AnswerId(row["related_answer_id"])
            if row.get("related_answer_id")
            else None
        ),
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
