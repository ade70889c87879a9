"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import VoteService
from qna.domain.value import Actor, VotableType, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    vote_type: VoteType
    actor: Actor


class CastVoteResponse(BaseModel):
    """Cast vote response with the recomputed tally."""

    votable_type: VotableType
    votable_id: str
    vote_type: VoteType
    upvotes: int
    downvotes: int
    vote_score: int


class CastVoteUseCase:
    """Use case for voting on a question or answer.

    Voting again replaces the caller's previous vote on the same item.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the item is missing or deleted
        """
        tally = await self.vote_service.cast_vote(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            user_id=request.actor.user_id,
            vote_type=request.vote_type,
        )

        return CastVoteResponse(
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            vote_type=request.vote_type,
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            vote_score=tally.score,
        )
