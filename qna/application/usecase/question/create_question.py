"""Create question use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from qna.domain.service import QuestionService, UserService
from qna.domain.value import Actor


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    actor: Actor  # Authenticated caller


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    description: str
    tags: list[str]
    author_id: str
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Steps:
        1. Validate and store the question
        2. Bump the author's questions_asked counter

        Raises:
            ValidationError: If title, description or tags are invalid
        """
        with logfire.span(
            "create_question.execute", user_id=str(request.actor.user_id)
        ):
            question = await self.question_service.create_question(
                author_id=request.actor.user_id,
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
            await self.user_service.increment_questions_asked(request.actor.user_id)

            return CreateQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                description=question.description,
                tags=[tag.root for tag in question.tags],
                author_id=str(question.author_id),
                created_at=question.created_at,
            )
