"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from qna.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from qna.interface.api.auth import CurrentActor

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    answer_id: UUID
    content: str


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CreateCommentAPIRequest,
    actor: CurrentActor,
    use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on an answer. The answer author is notified."""
    return await use_case.execute(
        CreateCommentRequest(
            answer_id=str(request.answer_id), content=request.content, actor=actor
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    actor: CurrentActor,
    use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Soft-delete a comment. Author or admin only."""
    return await use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), actor=actor)
    )
