"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import DeletionService
from qna.domain.value import Actor, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor: Actor


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool = True


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment (author or admin only)."""

    def __init__(self, deletion_service: DeletionService) -> None:
        self.deletion_service = deletion_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        comment = await self.deletion_service.delete_comment(
            CommentId(UUID(request.comment_id)), request.actor
        )
        return DeleteCommentResponse(comment_id=str(comment.id))
