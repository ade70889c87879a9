"""Pin answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import AcceptanceService
from qna.domain.value import Actor, AnswerId


class PinAnswerRequest(BaseModel):
    """Pin answer request."""

    answer_id: str  # UUID string
    actor: Actor  # Must be the question author


class PinAnswerResponse(BaseModel):
    """Pin answer response."""

    answer_id: str
    question_id: str
    is_accepted: bool
    is_pinned: bool
    pinned_answer_id: str


class PinAnswerUseCase:
    """Use case for pinning an answer to the top of its question."""

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        """Initialize pin answer use case.

        Args:
            acceptance_service: Acceptance/pin domain service
        """
        self.acceptance_service = acceptance_service

    async def execute(self, request: PinAnswerRequest) -> PinAnswerResponse:
        """Execute pin answer flow.

        Raises:
            NotFoundError: If the answer or its question is missing or deleted
            ForbiddenError: If the caller did not ask the question
        """
        answer, question = await self.acceptance_service.pin_answer(
            AnswerId(UUID(request.answer_id)), request.actor
        )
        return PinAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(question.id),
            is_accepted=answer.is_accepted,
            is_pinned=answer.is_pinned,
            pinned_answer_id=str(question.pinned_answer_id),
        )
