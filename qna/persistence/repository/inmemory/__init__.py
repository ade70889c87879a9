"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository
from .question import InMemoryQuestionRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
    "InMemoryQuestionRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
