"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .deletion_service import DeletionService
from .jwt_service import JWTService
from .listing_service import (
    AnswerThread,
    CommentView,
    ListingService,
    QuestionDetail,
    QuestionPage,
    QuestionSummary,
    order_answers,
)
from .notification_service import NotificationService
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "AnswerThread",
    "CommentService",
    "CommentView",
    "DeletionService",
    "JWTService",
    "ListingService",
    "NotificationService",
    "QuestionDetail",
    "QuestionPage",
    "QuestionService",
    "QuestionSummary",
    "Service",
    "UserService",
    "VoteService",
    "order_answers",
]
