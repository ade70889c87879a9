"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .get_question import (
    AnswerItem,
    CommentItem,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionListItem,
)

__all__ = [
    "AnswerItem",
    "CommentItem",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionListItem",
]
