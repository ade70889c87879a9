"""Acceptance and pin coordination."""

from typing import Tuple

import logfire

from qna.domain.error import ForbiddenError
from qna.domain.model import Answer, Question
from qna.domain.value import Actor, AnswerId

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


class AcceptanceService(Service):
    """Keeps the accepted/pinned flags of a question's answers consistent.

    For every question at most one answer is accepted and at most one is
    pinned, and ``question.accepted_answer_id`` / ``pinned_answer_id`` point
    at those answers. The two flags are independent: one answer may hold
    both, or two different answers may hold one each.

    Each change is a clear-then-set over the question's answers, run while
    holding the question's row lock so concurrent calls on the same
    question cannot interleave. The set steps write only their own
    columns and only while the answer is still active, so a concurrent
    deletion is never undone.
    """

    def __init__(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service

    async def accept_answer(
        self, answer_id: AnswerId, actor: Actor
    ) -> Tuple[Answer, Question]:
        """Mark an answer as the accepted answer of its question.

        Args:
            answer_id: Answer to accept
            actor: Caller, must be the question author

        Returns:
            The accepted answer and the updated question

        Raises:
            NotFoundError: If the answer or its question is missing, inactive or
                deleted while the change was in progress
            ForbiddenError: If the caller did not ask the question
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer, question = await self._authorize(answer_id, actor, "accept")

            await self.answer_service.clear_accepted(question.id)
            accepted = await self.answer_service.update_active(
                answer.id, is_accepted=True
            )
            question = await self.question_service.update_active(
                question.id, accepted_answer_id=accepted.id
            )

            logfire.info(
                "Answer accepted",
                answer_id=str(accepted.id),
                question_id=str(question.id),
            )
            return accepted, question

    async def pin_answer(
        self, answer_id: AnswerId, actor: Actor
    ) -> Tuple[Answer, Question]:
        """Pin an answer to the top of its question's answer list.

        Args:
            answer_id: Answer to pin
            actor: Caller, must be the question author

        Returns:
            The pinned answer and the updated question

        Raises:
            NotFoundError: If the answer or its question is missing, inactive or
                deleted while the change was in progress
            ForbiddenError: If the caller did not ask the question
        """
        with logfire.span(
            "acceptance_service.pin_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer, question = await self._authorize(answer_id, actor, "pin")

            await self.answer_service.clear_pinned(question.id)
            pinned = await self.answer_service.update_active(answer.id, is_pinned=True)
            question = await self.question_service.update_active(
                question.id, pinned_answer_id=pinned.id
            )

            logfire.info(
                "Answer pinned", answer_id=str(pinned.id), question_id=str(question.id)
            )
            return pinned, question

    async def _authorize(
        self, answer_id: AnswerId, actor: Actor, action: str
    ) -> Tuple[Answer, Question]:
        """Lock the answer's question and check the caller asked it."""
        answer = await self.answer_service.get_active_answer(answer_id)
        question = await self.question_service.lock_active_question(answer.question_id)

        if question.author_id != actor.user_id:
            logfire.warn(
                f"Non-author tried to {action} answer",
                answer_id=str(answer_id),
                user_id=str(actor.user_id),
            )
            raise ForbiddenError(
                f"{action} answers on", "question", str(question.id), str(actor.user_id)
            )

        return answer, question
