"""In-memory vote repository for testing."""

from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from qna.domain.model.vote import Vote, tally_votes
from qna.domain.repository.vote import VoteRepository
from qna.domain.value import UserId, VotableType, VoteTally

VoteKey = Tuple[VotableType, UUID, UserId]


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: Dict[VoteKey, Vote] = {}

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        return self._votes.get((votable_type, votable_id, user_id))

    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> List[Vote]:
        """Find all votes for a votable item."""
        return [
            v
            for (vtype, vid, _), v in self._votes.items()
            if vtype == votable_type and vid == votable_id
        ]

    async def save(self, vote: Vote) -> Vote:
        """Store a vote, replacing any previous vote with the same key."""
        self._votes[(vote.votable_type, vote.votable_id, vote.user_id)] = vote
        return vote

    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Count upvotes and downvotes on an item."""
        return tally_votes(await self.find_by_votable(votable_type, votable_id))

    async def tally_many(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> Dict[UUID, VoteTally]:
        """Count votes on several items."""
        return {vid: await self.tally(votable_type, vid) for vid in votable_ids}
