"""In-memory answer repository for testing."""

from typing import Dict, List, Optional, Sequence

from qna.domain.model.answer import Answer
from qna.domain.model.common import utcnow
from qna.domain.repository.answer import AnswerRepository
from qna.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        include_inactive: bool = False,
    ) -> List[Answer]:
        """Find the answers of a question, oldest first."""
        answers = [
            a
            for a in self._answers.values()
            if a.question_id == question_id and (include_inactive or a.is_active)
        ]
        answers.sort(key=lambda a: a.created_at)
        return answers

    async def count_by_questions(
        self,
        question_ids: Sequence[QuestionId],
        include_inactive: bool = False,
    ) -> Dict[QuestionId, int]:
        """Count answers for several questions."""
        counts: Dict[QuestionId, int] = {qid: 0 for qid in question_ids}
        for answer in self._answers.values():
            if answer.question_id in counts and (include_inactive or answer.is_active):
                counts[answer.question_id] += 1
        return counts

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer."""
        self._answers[answer.id] = answer
        return answer

    async def clear_accepted(self, question_id: QuestionId) -> None:
        """Unset is_accepted on every answer of a question."""
        for answer in list(self._answers.values()):
            if answer.question_id == question_id and answer.is_accepted:
                self._answers[answer.id] = answer.model_copy(
                    update={"is_accepted": False}
                )

    async def clear_pinned(self, question_id: QuestionId) -> None:
        """Unset is_pinned on every answer of a question."""
        for answer in list(self._answers.values()):
            if answer.question_id == question_id and answer.is_pinned:
                self._answers[answer.id] = answer.model_copy(
                    update={"is_pinned": False}
                )

    async def update_if_active(
        self, answer_id: AnswerId, **values
    ) -> Optional[Answer]:
        """Set fields on an active answer."""
        answer = self._answers.get(answer_id)
        if not answer or not answer.is_active:
            return None
        updated = answer.model_copy(update={**values, "updated_at": utcnow()})
        self._answers[answer_id] = updated
        return updated
