"""Answer domain service."""

from typing import Dict, List, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId, UserId

from .base import Service, describe_validation_error


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Answer:
        """Create an answer on a question.

        The caller checks that the question is active.

        Raises:
            ValidationError: If content is empty
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=author_id,
                    content=content,
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid answer", error=str(e))
                raise ValidationError(describe_validation_error(e)) from e

            saved = await self.answer_repository.save(answer)
            logfire.info("Answer created", answer_id=str(saved.id))
            return saved

    async def get_active_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer that has not been deleted.

        Raises:
            NotFoundError: If answer is missing or inactive
        """
        with logfire.span("answer_service.get_active_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or not answer.is_active:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def get_active_answers(self, question_id: QuestionId) -> List[Answer]:
        """Active answers of a question, oldest first."""
        return await self.answer_repository.find_by_question(question_id)

    async def count_active_answers(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Active answer counts for several questions."""
        if not question_ids:
            return {}
        return await self.answer_repository.count_by_questions(question_ids)

    async def clear_accepted(self, question_id: QuestionId) -> None:
        """Unset the accepted flag on every answer of a question."""
        await self.answer_repository.clear_accepted(question_id)

    async def clear_pinned(self, question_id: QuestionId) -> None:
        """Unset the pinned flag on every answer of a question."""
        await self.answer_repository.clear_pinned(question_id)

    async def update_active(self, answer_id: AnswerId, **changes) -> Answer:
        """Write only the given fields of an active answer.

        Raises:
            NotFoundError: If the answer is missing or was deleted meanwhile
        """
        updated = await self.answer_repository.update_if_active(answer_id, **changes)
        if not updated:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return updated
