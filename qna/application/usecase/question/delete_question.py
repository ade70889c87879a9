"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import DeletionService
from qna.domain.value import Actor, QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str  # UUID string
    actor: Actor


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    question_id: str
    deleted: bool = True


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question (author or admin only).

    Answers of the question are left untouched.
    """

    def __init__(self, deletion_service: DeletionService) -> None:
        self.deletion_service = deletion_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        question = await self.deletion_service.delete_question(
            QuestionId(UUID(request.question_id)), request.actor
        )
        return DeleteQuestionResponse(question_id=str(question.id))
