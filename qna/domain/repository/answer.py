"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Answers are an owned collection of their question, keyed by question_id.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, active or not.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        include_inactive: bool = False,
    ) -> List[Answer]:
        """Find the answers of a question, oldest first.

        Args:
            question_id: The question ID
            include_inactive: Whether to include soft-deleted answers

        Returns:
            Answers in creation order
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self,
        question_ids: Sequence[QuestionId],
        include_inactive: bool = False,
    ) -> Dict[QuestionId, int]:
        """Count answers for several questions (batch query).

        Args:
            question_ids: Question IDs to count for
            include_inactive: Whether to count soft-deleted answers

        Returns:
            Mapping of question ID to answer count (0 for questions without answers)
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def clear_accepted(self, question_id: QuestionId) -> None:
        """Set is_accepted=False on every answer of a question.

        Args:
            question_id: The question ID
        """
        pass

    @abstractmethod
    async def clear_pinned(self, question_id: QuestionId) -> None:
        """Set is_pinned=False on every answer of a question.

        Args:
            question_id: The question ID
        """
        pass

    @abstractmethod
    async def update_if_active(
        self, answer_id: AnswerId, **values
    ) -> Optional[Answer]:
        """Set the given fields on an active answer in one targeted update.

        Only the named columns are written, so a concurrent change to any
        other column is never overwritten.

        Args:
            answer_id: The answer ID
            **values: Column values to set

        Returns:
            The updated answer, or None if it is missing or inactive
        """
        pass
