"""PostgreSQL implementation of Answer repository."""

from typing import Dict, List, Optional, Sequence

import logfire
from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.error import store_operation
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    @store_operation
    async def find_by_question(
        self,
        question_id: QuestionId,
        include_inactive: bool = False,
    ) -> List[Answer]:
        """Find the answers of a question, oldest first."""
        stmt = select(answers_table).where(answers_table.c.question_id == question_id)
        if not include_inactive:
            stmt = stmt.where(answers_table.c.is_active.is_(True))
        stmt = stmt.order_by(answers_table.c.created_at, answers_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    @store_operation
    async def count_by_questions(
        self,
        question_ids: Sequence[QuestionId],
        include_inactive: bool = False,
    ) -> Dict[QuestionId, int]:
        """Count answers for several questions in one grouped query."""
        counts: Dict[QuestionId, int] = {qid: 0 for qid in question_ids}
        if not question_ids:
            return counts

        stmt = (
            select(answers_table.c.question_id, func.count().label("answer_count"))
            .where(answers_table.c.question_id.in_(list(question_ids)))
            .group_by(answers_table.c.question_id)
        )
        if not include_inactive:
            stmt = stmt.where(answers_table.c.is_active.is_(True))

        result = await self.session.execute(stmt)
        for row in result.fetchall():
            counts[QuestionId(row.question_id)] = row.answer_count
        return counts

    @store_operation
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            answer_dict = answer_to_dict(answer)
            stmt = insert(answers_table).values(**answer_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[answers_table.c.id],
                set_={
                    k: v
                    for k, v in answer_dict.items()
                    if k not in ("id", "question_id", "author_id", "created_at")
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    @store_operation
    async def clear_accepted(self, question_id: QuestionId) -> None:
        """Unset is_accepted on every answer of a question."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.question_id == question_id)
            .where(answers_table.c.is_accepted.is_(True))
            .values(is_accepted=False, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation
    async def clear_pinned(self, question_id: QuestionId) -> None:
        """Unset is_pinned on every answer of a question."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.question_id == question_id)
            .where(answers_table.c.is_pinned.is_(True))
            .values(is_pinned=False, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation
    async def update_if_active(
        self, answer_id: AnswerId, **values
    ) -> Optional[Answer]:
        """UPDATE ... WHERE id = :id AND is_active RETURNING the new row."""
        with logfire.span(
            "answer_repository.update_if_active",
            answer_id=str(answer_id),
            columns=sorted(values),
        ):
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer_id)
                .where(answers_table.c.is_active.is_(True))
                .values(**values, updated_at=func.now())
                .returning(*answers_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_answer(row._asdict()) if row else None
