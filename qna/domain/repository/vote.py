"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from qna.domain.model.vote import Vote
from qna.domain.value import UserId, VotableType, VoteTally


class VoteRepository(ABC):
    """Repository for votes.

    Votes are keyed by (votable_type, votable_id, user_id): a target holds
    at most one vote per user.
    """

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> List[Vote]:
        """Find all votes on a specific item.

        Args:
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            List of votes on the item
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Store a vote, replacing the user's previous vote on the same item.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Count upvotes and downvotes on an item.

        Args:
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            Vote tally (zero counts when nobody voted)
        """
        pass

    @abstractmethod
    async def tally_many(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> Dict[UUID, VoteTally]:
        """Count votes on several items (batch query).

        Args:
            votable_type: Type of items (question or answer)
            votable_ids: IDs of the items

        Returns:
            Mapping of item ID to tally, with an entry for every requested ID
        """
        pass
