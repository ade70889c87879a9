"""PostgreSQL implementation of the unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.repository import UnitOfWork
from qna.persistence.error import store_operation


class SessionUnitOfWork(UnitOfWork):
    """Commits the request's AsyncSession.

    The session autobegins a fresh transaction on its next statement.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request's database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.session.commit()
        logfire.info("Session committed early")
