"""Repository interfaces for the Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from qna.domain.repository.answer import AnswerRepository
from qna.domain.repository.comment import CommentRepository
from qna.domain.repository.notification import NotificationRepository
from qna.domain.repository.question import QuestionRepository
from qna.domain.repository.unit_of_work import UnitOfWork
from qna.domain.repository.user import UserRepository
from qna.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "CommentRepository",
    "VoteRepository",
    "NotificationRepository",
    "UnitOfWork",
]
