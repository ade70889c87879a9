"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from qna.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    PinAnswerRequest,
    PinAnswerResponse,
    PinAnswerUseCase,
)
from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from qna.domain.value import VotableType
from qna.interface.api.auth import CurrentActor
from qna.interface.api.routes.questions import VoteAPIRequest

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    question_id: UUID
    content: str


@router.post(
    "", response_model=CreateAnswerResponse, status_code=status.HTTP_201_CREATED
)
async def create_answer(
    request: CreateAnswerAPIRequest,
    actor: CurrentActor,
    use_case: FromDishka[CreateAnswerUseCase],
) -> CreateAnswerResponse:
    """Answer a question. The question author is notified."""
    return await use_case.execute(
        CreateAnswerRequest(
            question_id=str(request.question_id),
            content=request.content,
            actor=actor,
        )
    )


@router.post("/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    actor: CurrentActor,
    use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote or downvote an answer, replacing any earlier vote."""
    return await use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            vote_type=request.type,
            actor=actor,
        )
    )


@router.post("/{answer_id}/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    answer_id: UUID,
    actor: CurrentActor,
    use_case: FromDishka[AcceptAnswerUseCase],
) -> AcceptAnswerResponse:
    """Accept an answer. Question author only."""
    return await use_case.execute(
        AcceptAnswerRequest(answer_id=str(answer_id), actor=actor)
    )


@router.post("/{answer_id}/pin", response_model=PinAnswerResponse)
async def pin_answer(
    answer_id: UUID,
    actor: CurrentActor,
    use_case: FromDishka[PinAnswerUseCase],
) -> PinAnswerResponse:
    """Pin an answer to the top. Question author only."""
    return await use_case.execute(
        PinAnswerRequest(answer_id=str(answer_id), actor=actor)
    )


@router.delete("/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    actor: CurrentActor,
    use_case: FromDishka[DeleteAnswerUseCase],
) -> DeleteAnswerResponse:
    """Soft-delete an answer and its comments. Author or admin only."""
    return await use_case.execute(
        DeleteAnswerRequest(answer_id=str(answer_id), actor=actor)
    )
