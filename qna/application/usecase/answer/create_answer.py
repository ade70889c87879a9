"""Create answer use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.repository import UnitOfWork
from qna.domain.service import (
    AnswerService,
    NotificationService,
    QuestionService,
    UserService,
)
from qna.domain.value import Actor, QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    content: str
    actor: Actor


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    content: str
    author_id: str
    created_at: datetime


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create answer use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service
            notification_service: Notification dispatcher
            unit_of_work: Request transaction
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Check the question is active
        2. Store the answer and bump the author's answers_given counter
        3. Commit, so the answer survives a failed or cancelled dispatch
        4. Notify the question author (best-effort)

        Raises:
            NotFoundError: If the question is missing or deleted
            ValidationError: If content is empty
        """
        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            user_id=str(request.actor.user_id),
        ):
            question = await self.question_service.get_active_question(
                QuestionId(UUID(request.question_id))
            )
            answer = await self.answer_service.create_answer(
                question_id=question.id,
                author_id=request.actor.user_id,
                content=request.content,
            )
            await self.user_service.increment_answers_given(request.actor.user_id)
            await self.unit_of_work.commit()

            await self.notification_service.notify_answer_posted(
                question, answer, request.actor
            )

            return CreateAnswerResponse(
                answer_id=str(answer.id),
                question_id=str(answer.question_id),
                content=answer.content,
                author_id=str(answer.author_id),
                created_at=answer.created_at,
            )
