"""Comment domain service."""

from collections import defaultdict
from typing import Dict, List, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import AnswerId, CommentId, UserId

from .base import Service, describe_validation_error


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, answer_id: AnswerId, author_id: UserId, content: str
    ) -> Comment:
        """Create a comment on an answer.

        The caller checks that the answer is active.

        Raises:
            ValidationError: If content is empty or longer than 500 characters
        """
        with logfire.span(
            "comment_service.create_comment",
            answer_id=str(answer_id),
            author_id=str(author_id),
        ):
            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    answer_id=answer_id,
                    author_id=author_id,
                    content=content,
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid comment", error=str(e))
                raise ValidationError(describe_validation_error(e)) from e

            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_active_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment that has not been deleted.

        Raises:
            NotFoundError: If comment is missing or inactive
        """
        with logfire.span(
            "comment_service.get_active_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or not comment.is_active:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def get_active_comments(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, List[Comment]]:
        """Active comments of several answers, grouped by answer, oldest first."""
        grouped: Dict[AnswerId, List[Comment]] = defaultdict(list)
        if not answer_ids:
            return grouped
        for comment in await self.comment_repository.find_by_answers(answer_ids):
            grouped[comment.answer_id].append(comment)
        return grouped

    async def deactivate_for_answer(self, answer_id: AnswerId) -> int:
        """Soft-delete all comments of an answer.

        Returns:
            Number of comments deactivated
        """
        return await self.comment_repository.deactivate_by_answer(answer_id)

    async def update_active(self, comment_id: CommentId, **changes) -> Comment:
        """Write only the given fields of an active comment.

        Raises:
            NotFoundError: If the comment is missing or was deleted meanwhile
        """
        updated = await self.comment_repository.update_if_active(comment_id, **changes)
        if not updated:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return updated
