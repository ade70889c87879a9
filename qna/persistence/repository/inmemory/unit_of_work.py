"""In-memory unit of work for testing."""

from qna.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """Writes to the in-memory repositories are immediate; commits are counted."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        """Record a commit."""
        self.commits += 1
