"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qna.domain.model.user import User
from qna.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query for author summaries).

        Args:
            user_ids: User IDs to load; unknown IDs are skipped

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def increment_questions_asked(self, user_id: UserId) -> None:
        """Atomically increment the user's questions_asked counter.

        Args:
            user_id: The user ID
        """
        pass

    @abstractmethod
    async def increment_answers_given(self, user_id: UserId) -> None:
        """Atomically increment the user's answers_given counter.

        Args:
            user_id: The user ID
        """
        pass
