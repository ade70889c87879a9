"""Vote record.

One row per (target, user). Casting a vote replaces the user's previous
vote on the same target instead of adding to it.
"""

from datetime import datetime
from typing import Iterable
from uuid import UUID

from pydantic import Field

from qna.domain.model.common import DomainModel, utcnow
from qna.domain.value import UserId, VotableType, VoteTally, VoteType


class Vote(DomainModel):
    """A user's vote on a question or answer."""

    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # QuestionId or AnswerId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)


def tally_votes(votes: Iterable[Vote]) -> VoteTally:
    """Count upvotes and downvotes in a collection of votes."""
    upvotes = 0
    downvotes = 0
    for vote in votes:
        if vote.vote_type == VoteType.UPVOTE:
            upvotes += 1
        else:
            downvotes += 1
    return VoteTally(upvotes=upvotes, downvotes=downvotes)
