"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qna.domain.model.question import Question
from qna.domain.value import AnswerId, QuestionId, QuestionSortOrder, TagName


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, active or not.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question and lock it until the current transaction ends.

        Used to serialize the accept/pin clear-and-set sequence per question.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[TagName]] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        include_inactive: bool = False,
        limit: Optional[int] = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering, ordering and pagination.

        The vote score is not stored, so VOTES cannot be ordered here and
        falls back to NEWEST; callers needing vote order sort the full
        result themselves.

        Args:
            search: Case-insensitive substring matched against title or description
            tags: Any-match tag filter (None or empty for all tags)
            sort: Sort order
            include_inactive: Whether to include soft-deleted questions
            limit: Maximum number of questions to return (None for no limit)
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[TagName]] = None,
        include_inactive: bool = False,
    ) -> int:
        """Count questions matching the given filters.

        Args:
            search: Case-insensitive substring matched against title or description
            tags: Any-match tag filter (None or empty for all tags)
            include_inactive: Whether to include soft-deleted questions

        Returns:
            Total number of questions matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1.

        Args:
            question_id: The question ID
        """
        pass

    @abstractmethod
    async def update_if_active(
        self, question_id: QuestionId, **values
    ) -> Optional[Question]:
        """Set the given fields on an active question in one targeted update.

        Only the named columns are written, so a concurrent change to any
        other column (views, the accepted or pinned answer) is kept.

        Args:
            question_id: The question ID
            **values: Column values to set

        Returns:
            The updated question, or None if it is missing or inactive
        """
        pass

    @abstractmethod
    async def clear_answer_references(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> None:
        """Unset accepted_answer_id and pinned_answer_id where they name an answer.

        Args:
            question_id: The question ID
            answer_id: The answer no longer shown
        """
        pass
