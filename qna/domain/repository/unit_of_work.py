"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """The request's transaction.

    The request scope commits once at the end. Use cases that run a
    best-effort step after their primary write commit first, so the
    primary write survives whatever happens to that step.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every write so far durable.

        Later writes run in a new transaction that the request scope
        commits or rolls back as usual.
        """
        pass
