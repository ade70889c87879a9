"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId
from qna.persistence.error import store_operation
from qna.persistence.mappers import row_to_user, user_to_dict
from qna.persistence.tables import users_table


# Counters only move through their atomic increments
_IMMUTABLE_ON_UPDATE = {
    "id",
    "questions_asked",
    "answers_given",
    "reputation",
    "created_at",
}


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @store_operation
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    @store_operation
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        with logfire.span("user_repository.save", user_id=str(user.id)):
            user_dict = user_to_dict(user)
            stmt = insert(users_table).values(**user_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={
                    k: v
                    for k, v in user_dict.items()
                    if k not in _IMMUTABLE_ON_UPDATE
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return user

    @store_operation
    async def increment_questions_asked(self, user_id: UserId) -> None:
        """Atomically increment questions_asked by 1."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(questions_asked=users_table.c.questions_asked + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @store_operation
    async def increment_answers_given(self, user_id: UserId) -> None:
        """Atomically increment answers_given by 1."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(answers_given=users_table.c.answers_given + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
