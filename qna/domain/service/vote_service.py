"""Vote domain service (the vote ledger)."""

from typing import Dict, Sequence
from uuid import UUID

import logfire

from qna.domain.model.vote import Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VotableType,
    VoteTally,
    VoteType,
)

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


class VoteService(Service):
    """Domain service for vote operations.

    A user holds at most one vote per target. Casting again replaces the
    previous vote, whatever its direction. Scores are never stored: every
    read recounts the target's votes.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service

    async def cast_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        vote_type: VoteType,
    ) -> VoteTally:
        """Record a user's vote on a question or answer.

        Any authenticated user may vote, including the target's author.

        Args:
            votable_type: Type of target
            votable_id: Target ID
            user_id: Voting user ID
            vote_type: Vote direction

        Returns:
            The target's tally after the vote

        Raises:
            NotFoundError: If the target is missing or inactive
        """
        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            if votable_type == VotableType.QUESTION:
                await self.question_service.get_active_question(
                    QuestionId(votable_id)
                )
            else:
                await self.answer_service.get_active_answer(AnswerId(votable_id))

            previous = await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )
            await self.vote_repository.save(
                Vote(
                    user_id=user_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                    vote_type=vote_type,
                )
            )

            tally = await self.vote_repository.tally(votable_type, votable_id)
            logfire.info(
                "Vote cast",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                replaced=previous.vote_type.value if previous else None,
                score=tally.score,
            )
            return tally

    async def get_tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Count the votes on one target."""
        return await self.vote_repository.tally(votable_type, votable_id)

    async def get_tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteTally]:
        """Count the votes on several targets of the same type.

        Returns:
            Mapping with an entry (possibly all zeros) for every requested ID
        """
        if not votable_ids:
            return {}
        return await self.vote_repository.tally_many(votable_type, votable_ids)
