"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import AcceptanceService
from qna.domain.value import Actor, AnswerId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str  # UUID string
    actor: Actor  # Must be the question author


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    answer_id: str
    question_id: str
    is_accepted: bool
    is_pinned: bool
    accepted_answer_id: str


class AcceptAnswerUseCase:
    """Use case for accepting an answer.

    Accepting another answer later moves the flag; there is no unaccept.
    """

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance/pin domain service
        """
        self.acceptance_service = acceptance_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer or its question is missing or deleted
            ForbiddenError: If the caller did not ask the question
        """
        answer, question = await self.acceptance_service.accept_answer(
            AnswerId(UUID(request.answer_id)), request.actor
        )
        return AcceptAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(question.id),
            is_accepted=answer.is_accepted,
            is_pinned=answer.is_pinned,
            accepted_answer_id=str(question.accepted_answer_id),
        )
