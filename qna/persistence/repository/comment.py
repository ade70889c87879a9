"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import AnswerId, CommentId
from qna.persistence.error import store_operation
from qna.persistence.mappers import comment_to_dict, row_to_comment
from qna.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @store_operation
    async def find_by_answers(
        self,
        answer_ids: Sequence[AnswerId],
        include_inactive: bool = False,
    ) -> List[Comment]:
        """Find the comments of several answers, oldest first."""
        if not answer_ids:
            return []

        stmt = select(comments_table).where(
            comments_table.c.answer_id.in_(list(answer_ids))
        )
        if not include_inactive:
            stmt = stmt.where(comments_table.c.is_active.is_(True))
        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @store_operation
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            comment_dict = comment_to_dict(comment)
            stmt = insert(comments_table).values(**comment_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[comments_table.c.id],
                set_={
                    k: v
                    for k, v in comment_dict.items()
                    if k not in ("id", "answer_id", "author_id", "created_at")
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    @store_operation
    async def deactivate_by_answer(self, answer_id: AnswerId) -> int:
        """Soft-delete every active comment of an answer in one update."""
        with logfire.span(
            "comment_repository.deactivate_by_answer", answer_id=str(answer_id)
        ):
            stmt = (
                update(comments_table)
                .where(comments_table.c.answer_id == answer_id)
                .where(comments_table.c.is_active.is_(True))
                .values(is_active=False, updated_at=func.now())
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount or 0

    @store_operation
    async def update_if_active(
        self, comment_id: CommentId, **values
    ) -> Optional[Comment]:
        """UPDATE ... WHERE id = :id AND is_active RETURNING the new row."""
        with logfire.span(
            "comment_repository.update_if_active",
            comment_id=str(comment_id),
            columns=sorted(values),
        ):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .where(comments_table.c.is_active.is_(True))
                .values(**values, updated_at=func.now())
                .returning(*comments_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_comment(row._asdict()) if row else None
