"""Create comment use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.repository import UnitOfWork
from qna.domain.service import AnswerService, CommentService, NotificationService
from qna.domain.value import Actor, AnswerId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    answer_id: str  # UUID string
    content: str
    actor: Actor


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    answer_id: str
    content: str
    author_id: str
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        comment_service: CommentService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create comment use case.

        Args:
            answer_service: Answer domain service
            comment_service: Comment domain service
            notification_service: Notification dispatcher
            unit_of_work: Request transaction
        """
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.notification_service = notification_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The comment is committed before the answer author is notified.

        Raises:
            NotFoundError: If the answer is missing or deleted
            ValidationError: If content is empty or longer than 500 characters
        """
        with logfire.span(
            "create_comment.execute",
            answer_id=request.answer_id,
            user_id=str(request.actor.user_id),
        ):
            answer = await self.answer_service.get_active_answer(
                AnswerId(UUID(request.answer_id))
            )
            comment = await self.comment_service.create_comment(
                answer_id=answer.id,
                author_id=request.actor.user_id,
                content=request.content,
            )
            await self.unit_of_work.commit()

            await self.notification_service.notify_comment_posted(
                answer, comment, request.actor
            )

            return CreateCommentResponse(
                comment_id=str(comment.id),
                answer_id=str(comment.answer_id),
                content=comment.content,
                author_id=str(comment.author_id),
                created_at=comment.created_at,
            )
