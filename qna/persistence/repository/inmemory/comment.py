"""In-memory comment repository for testing."""

from typing import List, Optional, Sequence

from qna.domain.model.comment import Comment
from qna.domain.model.common import utcnow
from qna.domain.repository.comment import CommentRepository
from qna.domain.value import AnswerId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_answers(
        self,
        answer_ids: Sequence[AnswerId],
        include_inactive: bool = False,
    ) -> List[Comment]:
        """Find the comments of several answers, oldest first."""
        wanted = set(answer_ids)
        comments = [
            c
            for c in self._comments.values()
            if c.answer_id in wanted and (include_inactive or c.is_active)
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def deactivate_by_answer(self, answer_id: AnswerId) -> int:
        """Soft-delete every active comment of an answer."""
        count = 0
        for comment in list(self._comments.values()):
            if comment.answer_id == answer_id and comment.is_active:
                self._comments[comment.id] = comment.model_copy(
                    update={"is_active": False}
                )
                count += 1
        return count

    async def update_if_active(
        self, comment_id: CommentId, **values
    ) -> Optional[Comment]:
        """Set fields on an active comment."""
        comment = self._comments.get(comment_id)
        if not comment or not comment.is_active:
            return None
        updated = comment.model_copy(update={**values, "updated_at": utcnow()})
        self._comments[comment_id] = updated
        return updated
