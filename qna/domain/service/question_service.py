"""Question domain service."""

from typing import Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import AnswerId, QuestionId, UserId

from .base import Service, describe_validation_error


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str,
        tags: Sequence[str] = (),
    ) -> Question:
        """Create a new question.

        Tags are trimmed, lowercased and de-duplicated before the five-tag
        limit is checked.

        Args:
            author_id: Author's user ID
            title: Question title
            description: Question body (markup, stored verbatim)
            tags: Tag names

        Returns:
            Created question

        Raises:
            ValidationError: If title, description or tags are invalid
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            tags=list(tags),
        ):
            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    title=title,
                    description=description,
                    tags=list(tags),
                    author_id=author_id,
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid question", error=str(e))
                raise ValidationError(describe_validation_error(e)) from e

            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_active_question(self, question_id: QuestionId) -> Question:
        """Get a question that has not been deleted.

        Raises:
            NotFoundError: If question is missing or inactive
        """
        with logfire.span(
            "question_service.get_active_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question or not question.is_active:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def lock_active_question(self, question_id: QuestionId) -> Question:
        """Get an active question and hold its row lock until the transaction ends.

        Raises:
            NotFoundError: If question is missing or inactive
        """
        with logfire.span(
            "question_service.lock_active_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id_for_update(
                question_id
            )
            if not question or not question.is_active:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def lock_question(self, question_id: QuestionId) -> None:
        """Hold a question's row lock until the transaction ends, active or not.

        Taken before touching the question's answers so that answer deletion
        and accept/pin acquire their locks in the same order.
        """
        await self.question_repository.find_by_id_for_update(question_id)

    async def record_view(self, question: Question) -> Question:
        """Count one view of a question.

        The store increments atomically; the returned copy reflects this
        fetch's increment.
        """
        await self.question_repository.increment_views(question.id)
        return question.model_copy(update={"views": question.views + 1})

    async def update_active(self, question_id: QuestionId, **changes) -> Question:
        """Write only the given fields of an active question.

        Raises:
            NotFoundError: If the question is missing or was deleted meanwhile
        """
        updated = await self.question_repository.update_if_active(
            question_id, **changes
        )
        if not updated:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return updated

    async def clear_answer_references(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> None:
        """Forget a deleted answer as the question's accepted or pinned answer."""
        await self.question_repository.clear_answer_references(question_id, answer_id)

