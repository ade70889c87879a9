"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, case, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import UserId, VotableType, VoteTally, VoteType
from qna.persistence.error import store_operation
from qna.persistence.mappers import row_to_vote, vote_to_dict
from qna.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_operation
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    @store_operation
    async def find_by_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> List[Vote]:
        """Find all votes on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    @store_operation
    async def save(self, vote: Vote) -> Vote:
        """Store a vote, replacing the user's previous one in a single upsert."""
        with logfire.span(
            "vote_repository.save",
            votable_type=vote.votable_type.value,
            votable_id=str(vote.votable_id),
            user_id=str(vote.user_id),
        ):
            stmt = insert(votes_table).values(**vote_to_dict(vote))
            stmt = stmt.on_conflict_do_update(
                index_elements=[
                    votes_table.c.votable_type,
                    votes_table.c.votable_id,
                    votes_table.c.user_id,
                ],
                set_={
                    "vote_type": stmt.excluded.vote_type,
                    "created_at": stmt.excluded.created_at,
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return vote

    @store_operation
    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Count upvotes and downvotes on an item."""
        tallies = await self.tally_many(votable_type, [votable_id])
        return tallies[votable_id]

    @store_operation
    async def tally_many(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> Dict[UUID, VoteTally]:
        """Count votes on several items in one grouped query."""
        tallies: Dict[UUID, VoteTally] = {vid: VoteTally() for vid in votable_ids}
        if not votable_ids:
            return tallies

        is_up = votes_table.c.vote_type == VoteType.UPVOTE.value
        stmt = (
            select(
                votes_table.c.votable_id,
                func.sum(case((is_up, 1), else_=0)).label("upvotes"),
                func.sum(case((is_up, 0), else_=1)).label("downvotes"),
            )
            .where(votes_table.c.votable_type == votable_type.value)
            .where(votes_table.c.votable_id.in_(list(votable_ids)))
            .group_by(votes_table.c.votable_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            tallies[row.votable_id] = VoteTally(
                upvotes=int(row.upvotes), downvotes=int(row.downvotes)
            )
        return tallies
