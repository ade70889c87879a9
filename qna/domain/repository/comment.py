"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qna.domain.model.comment import Comment
from qna.domain.value import AnswerId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are an owned collection of their answer, keyed by answer_id.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, active or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_answers(
        self,
        answer_ids: Sequence[AnswerId],
        include_inactive: bool = False,
    ) -> List[Comment]:
        """Find the comments of several answers, oldest first (batch query).

        Args:
            answer_ids: Answer IDs
            include_inactive: Whether to include soft-deleted comments

        Returns:
            Comments in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def deactivate_by_answer(self, answer_id: AnswerId) -> int:
        """Soft-delete every comment of an answer in one update.

        Args:
            answer_id: The answer ID

        Returns:
            Number of comments that were active and are now inactive
        """
        pass

    @abstractmethod
    async def update_if_active(
        self, comment_id: CommentId, **values
    ) -> Optional[Comment]:
        """Set the given fields on an active comment in one targeted update.

        Args:
            comment_id: The comment ID
            **values: Column values to set

        Returns:
            The updated comment, or None if it is missing or inactive
        """
        pass
