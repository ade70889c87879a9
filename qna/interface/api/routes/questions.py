"""Question routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from qna.domain.value import QuestionSortOrder, VotableType, VoteType
from qna.interface.api.auth import CurrentActor

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)


class VoteAPIRequest(BaseModel):
    """API request for voting on a question or answer."""

    type: VoteType


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    search: Optional[str] = Query(default=None, max_length=200),
    tags: Optional[str] = Query(default=None, description="Comma-separated tags"),
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
) -> ListQuestionsResponse:
    """List active questions with search, tag filter, sorting and paging."""
    tag_list = [t for t in tags.split(",") if t.strip()] if tags else []
    return await use_case.execute(
        ListQuestionsRequest(
            search=search, tags=tag_list, sort=sort, page=page, limit=limit
        )
    )


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    actor: CurrentActor,
    use_case: FromDishka[CreateQuestionUseCase],
) -> CreateQuestionResponse:
    """Ask a new question. Requires authentication."""
    return await use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            description=request.description,
            tags=request.tags,
            actor=actor,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID, use_case: FromDishka[GetQuestionUseCase]
) -> GetQuestionResponse:
    """Get a question with its answers and comments.

    Each call counts one view.
    """
    return await use_case.execute(GetQuestionRequest(question_id=str(question_id)))


@router.post("/{question_id}/vote", response_model=CastVoteResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    actor: CurrentActor,
    use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote or downvote a question, replacing any earlier vote."""
    return await use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            vote_type=request.type,
            actor=actor,
        )
    )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    actor: CurrentActor,
    use_case: FromDishka[DeleteQuestionUseCase],
) -> DeleteQuestionResponse:
    """Soft-delete a question. Author or admin only."""
    return await use_case.execute(
        DeleteQuestionRequest(question_id=str(question_id), actor=actor)
    )
