"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import DeletionService
from qna.domain.value import Actor, AnswerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str  # UUID string
    actor: Actor


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    answer_id: str
    comments_deleted: int
    deleted: bool = True


class DeleteAnswerUseCase:
    """Use case for soft-deleting an answer together with its comments."""

    def __init__(self, deletion_service: DeletionService) -> None:
        self.deletion_service = deletion_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        answer, comment_count = await self.deletion_service.delete_answer(
            AnswerId(UUID(request.answer_id)), request.actor
        )
        return DeleteAnswerResponse(
            answer_id=str(answer.id), comments_deleted=comment_count
        )
