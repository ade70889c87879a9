"""Test configuration and helpers."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from qna.config import AuthSettings
from qna.domain.model import Answer, Comment, Question, User
from qna.domain.value import (
    Actor,
    AnswerId,
    CommentId,
    QuestionId,
    TagName,
    UserId,
    UserRole,
)

# Test settings unless the environment says otherwise
os.environ.setdefault("ENVIRONMENT", "test")

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed timestamp ``minutes`` after BASE_TIME, for deterministic ordering."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "alice", **overrides) -> User:
    """Build a user with sensible defaults."""
    fields = {"id": UserId(uuid4()), "username": username}
    fields.update(overrides)
    return User(**fields)


def actor_for(user: User, role: UserRole | None = None) -> Actor:
    """The verified identity of ``user`` as the API would resolve it."""
    return Actor(user_id=user.id, username=user.username, role=role or user.role)


def mint_token(
    user_id: str,
    username: str,
    settings: AuthSettings,
    role: str = "user",
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Sign a token the way the identity provider does."""
    payload = {
        "user_id": user_id,
        "username": username,
        "role": role,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def make_question(author: User, title: str = "How do I sort a dict?", **overrides) -> Question:
    """Build a question by ``author``."""
    fields = {
        "id": QuestionId(uuid4()),
        "title": title,
        "description": "<p>I have a dict and want it sorted by value.</p>",
        "tags": [TagName("python")],
        "author_id": author.id,
    }
    fields.update(overrides)
    return Question(**fields)


def make_answer(question: Question, author: User, **overrides) -> Answer:
    """Build an answer to ``question`` by ``author``."""
    fields = {
        "id": AnswerId(uuid4()),
        "question_id": question.id,
        "author_id": author.id,
        "content": "Use sorted() with a key function.",
    }
    fields.update(overrides)
    return Answer(**fields)


def make_comment(answer: Answer, author: User, **overrides) -> Comment:
    """Build a comment on ``answer`` by ``author``."""
    fields = {
        "id": CommentId(uuid4()),
        "answer_id": answer.id,
        "author_id": author.id,
        "content": "Nice, thanks!",
    }
    fields.update(overrides)
    return Comment(**fields)
