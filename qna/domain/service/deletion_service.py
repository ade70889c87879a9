"""Soft-delete cascade."""

from typing import Tuple

import logfire

from qna.domain.error import ForbiddenError
from qna.domain.model import Answer, Comment, Question
from qna.domain.value import Actor, AnswerId, CommentId, QuestionId

from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .question_service import QuestionService


class DeletionService(Service):
    """Soft-deletes content on behalf of its author or an admin.

    Nothing is removed from the store: deletion clears ``is_active`` and
    every read path filters on it. Deleting an answer also deactivates its
    comments and unsets it as its question's accepted or pinned answer.
    Deleting a question leaves its answers as they are; they are
    unreachable through the question's listing and detail reads.

    Deletion writes only ``is_active``, so it cannot roll back a concurrent
    accept or pin. Answer deletion takes the question's row lock first, in
    the same order as accept/pin.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
    ) -> None:
        """Initialize deletion service.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            comment_service: Comment domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service

    async def delete_question(self, question_id: QuestionId, actor: Actor) -> Question:
        """Soft-delete a question.

        Raises:
            NotFoundError: If the question is missing or already deleted
            ForbiddenError: If the caller is neither the author nor an admin
        """
        with logfire.span(
            "deletion_service.delete_question",
            question_id=str(question_id),
            user_id=str(actor.user_id),
        ):
            question = await self.question_service.get_active_question(question_id)
            self._check_moderation(actor, question.author_id, "question", question_id)

            deleted = await self.question_service.update_active(
                question.id, is_active=False
            )
            logfire.info("Question deleted", question_id=str(question_id))
            return deleted

    async def delete_answer(
        self, answer_id: AnswerId, actor: Actor
    ) -> Tuple[Answer, int]:
        """Soft-delete an answer and all of its comments.

        If the answer was accepted or pinned, the question no longer points
        at it.

        Returns:
            The deleted answer and the number of comments deactivated with it

        Raises:
            NotFoundError: If the answer is missing or already deleted
            ForbiddenError: If the caller is neither the author nor an admin
        """
        with logfire.span(
            "deletion_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer = await self.answer_service.get_active_answer(answer_id)
            self._check_moderation(actor, answer.author_id, "answer", answer_id)

            await self.question_service.lock_question(answer.question_id)
            deleted = await self.answer_service.update_active(answer.id, is_active=False)
            comment_count = await self.comment_service.deactivate_for_answer(answer_id)
            await self.question_service.clear_answer_references(
                answer.question_id, answer.id
            )
            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                comments_deactivated=comment_count,
            )
            return deleted, comment_count

    async def delete_comment(self, comment_id: CommentId, actor: Actor) -> Comment:
        """Soft-delete a comment.

        Raises:
            NotFoundError: If the comment is missing or already deleted
            ForbiddenError: If the caller is neither the author nor an admin
        """
        with logfire.span(
            "deletion_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(actor.user_id),
        ):
            comment = await self.comment_service.get_active_comment(comment_id)
            self._check_moderation(actor, comment.author_id, "comment", comment_id)

            deleted = await self.comment_service.update_active(
                comment.id, is_active=False
            )
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return deleted

    @staticmethod
    def _check_moderation(actor: Actor, author_id, resource: str, resource_id) -> None:
        if not actor.can_moderate(author_id):
            logfire.warn(
                f"Unauthorized {resource} deletion attempt",
                resource_id=str(resource_id),
                user_id=str(actor.user_id),
            )
            raise ForbiddenError("delete", resource, str(resource_id), str(actor.user_id))
