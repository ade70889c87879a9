"""PostgreSQL implementation of Question repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import String, case, cast, desc, func, null, or_, select, update
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import AnswerId, QuestionId, QuestionSortOrder, TagName
from qna.persistence.error import store_operation
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import questions_table


def _escape_like(text: str) -> str:
    """Escape LIKE wildcards so the search text matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# Views only move through increment_views, so a save never rewinds them
_IMMUTABLE_ON_UPDATE = {"id", "author_id", "views", "created_at"}


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span("question_repository.find_by_id", question_id=str(question_id)):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_question(row._asdict()) if row else None

    @store_operation
    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question and lock its row (SELECT ... FOR UPDATE)."""
        with logfire.span(
            "question_repository.find_by_id_for_update", question_id=str(question_id)
        ):
            stmt = (
                select(questions_table)
                .where(questions_table.c.id == question_id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_question(row._asdict()) if row else None

    def _filter(self, stmt, search, tags, include_inactive):
        if not include_inactive:
            stmt = stmt.where(questions_table.c.is_active.is_(True))

        if search:
            pattern = f"%{_escape_like(search)}%"
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern, escape="\\"),
                    questions_table.c.description.ilike(pattern, escape="\\"),
                )
            )

        if tags:
            wanted = cast([tag.root for tag in tags], postgresql.ARRAY(String(30)))
            stmt = stmt.where(questions_table.c.tags.overlap(wanted))

        return stmt

    @store_operation
    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[TagName]] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        include_inactive: bool = False,
        limit: Optional[int] = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering, ordering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            search=search,
            tags=[t.root for t in tags] if tags else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter(
                select(questions_table), search, tags, include_inactive
            )

            if sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(questions_table.c.created_at)
            elif sort == QuestionSortOrder.VIEWS:
                stmt = stmt.order_by(
                    desc(questions_table.c.views), desc(questions_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            if limit is not None:
                stmt = stmt.limit(limit)
            stmt = stmt.offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Questions fetched", count=len(questions))
            return questions

    @store_operation
    async def count(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[TagName]] = None,
        include_inactive: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        with logfire.span("question_repository.count", search=search):
            stmt = self._filter(
                select(func.count()).select_from(questions_table),
                search,
                tags,
                include_inactive,
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    @store_operation
    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            question_dict = question_to_dict(question)
            stmt = postgresql.insert(questions_table).values(**question_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[questions_table.c.id],
                set_={
                    k: v
                    for k, v in question_dict.items()
                    if k not in _IMMUTABLE_ON_UPDATE
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return question

    @store_operation
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation
    async def update_if_active(
        self, question_id: QuestionId, **values
    ) -> Optional[Question]:
        """UPDATE ... WHERE id = :id AND is_active RETURNING the new row."""
        with logfire.span(
            "question_repository.update_if_active",
            question_id=str(question_id),
            columns=sorted(values),
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .where(questions_table.c.is_active.is_(True))
                .values(**values, updated_at=func.now())
                .returning(*questions_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_question(row._asdict()) if row else None

    @store_operation
    async def clear_answer_references(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> None:
        """Null out accepted_answer_id / pinned_answer_id equal to answer_id."""
        accepted = questions_table.c.accepted_answer_id
        pinned = questions_table.c.pinned_answer_id
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .where(or_(accepted == answer_id, pinned == answer_id))
            .values(
                accepted_answer_id=case((accepted == answer_id, null()), else_=accepted),
                pinned_answer_id=case((pinned == answer_id, null()), else_=pinned),
                updated_at=func.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
