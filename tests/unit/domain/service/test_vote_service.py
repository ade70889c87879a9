"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from qna.domain.service import VoteService
from qna.domain.value import VotableType, VoteType
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed_question(unit_env, **overrides):
    author = await (await unit_env.get(UserRepository)).save(make_user("asker"))
    question_repo = await unit_env.get(QuestionRepository)
    return await question_repo.save(make_question(author, **overrides))


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_upvote_counts_once(self, unit_env):
        """A first upvote yields score 1."""
        vote_service = await unit_env.get(VoteService)
        question = await _seed_question(unit_env)

        tally = await vote_service.cast_vote(
            VotableType.QUESTION, question.id, make_user().id, VoteType.UPVOTE
        )

        assert tally.upvotes == 1
        assert tally.downvotes == 0
        assert tally.score == 1

    @pytest.mark.asyncio
    async def test_repeated_upvote_does_not_accumulate(self, unit_env):
        """Voting the same way twice still counts one vote."""
        vote_service = await unit_env.get(VoteService)
        question = await _seed_question(unit_env)
        voter = make_user("voter")

        await vote_service.cast_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
        )
        tally = await vote_service.cast_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
        )

        assert tally.score == 1

    @pytest.mark.asyncio
    async def test_opposite_vote_replaces_previous(self, unit_env):
        """Switching from upvote to downvote moves the score from 1 to -1."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question = await _seed_question(unit_env)
        voter = make_user("voter")

        await vote_service.cast_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.UPVOTE
        )
        tally = await vote_service.cast_vote(
            VotableType.QUESTION, question.id, voter.id, VoteType.DOWNVOTE
        )

        assert tally.upvotes == 0
        assert tally.downvotes == 1
        assert tally.score == -1

        votes = await vote_repo.find_by_votable(VotableType.QUESTION, question.id)
        assert len(votes) == 1
        assert votes[0].vote_type == VoteType.DOWNVOTE

    @pytest.mark.asyncio
    async def test_score_is_upvotes_minus_downvotes(self, unit_env):
        """Two upvotes and one downvote from distinct users score 1."""
        vote_service = await unit_env.get(VoteService)
        question = await _seed_question(unit_env)

        for vote_type in (VoteType.UPVOTE, VoteType.UPVOTE, VoteType.DOWNVOTE):
            tally = await vote_service.cast_vote(
                VotableType.QUESTION, question.id, make_user().id, vote_type
            )

        assert (tally.upvotes, tally.downvotes, tally.score) == (2, 1, 1)

    @pytest.mark.asyncio
    async def test_author_may_vote_on_own_question(self, unit_env):
        """Self-votes are allowed."""
        vote_service = await unit_env.get(VoteService)
        question = await _seed_question(unit_env)

        tally = await vote_service.cast_vote(
            VotableType.QUESTION, question.id, question.author_id, VoteType.UPVOTE
        )

        assert tally.score == 1

    @pytest.mark.asyncio
    async def test_vote_on_answer(self, unit_env):
        """Answers keep their own tally, separate from the question's."""
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await _seed_question(unit_env)
        answer = await answer_repo.save(make_answer(question, make_user("helper")))

        tally = await vote_service.cast_vote(
            VotableType.ANSWER, answer.id, make_user().id, VoteType.DOWNVOTE
        )

        assert tally.score == -1
        question_tally = await vote_service.get_tally(
            VotableType.QUESTION, question.id
        )
        assert question_tally.score == 0

    @pytest.mark.asyncio
    async def test_vote_on_missing_question_raises_not_found(self, unit_env):
        """Voting on a question that does not exist fails."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await vote_service.cast_vote(
                VotableType.QUESTION, uuid4(), make_user().id, VoteType.UPVOTE
            )

    @pytest.mark.asyncio
    async def test_vote_on_deleted_question_raises_not_found(self, unit_env):
        """A soft-deleted question cannot be voted on."""
        vote_service = await unit_env.get(VoteService)
        question = await _seed_question(unit_env, is_active=False)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                VotableType.QUESTION, question.id, make_user().id, VoteType.UPVOTE
            )

    @pytest.mark.asyncio
    async def test_vote_on_deleted_answer_raises_not_found(self, unit_env):
        """A soft-deleted answer cannot be voted on."""
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await _seed_question(unit_env)
        answer = await answer_repo.save(
            make_answer(question, make_user("helper"), is_active=False)
        )

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.cast_vote(
                VotableType.ANSWER, answer.id, make_user().id, VoteType.UPVOTE
            )


class TestGetTallies:
    """Tests for get_tallies method."""

    @pytest.mark.asyncio
    async def test_every_requested_id_has_an_entry(self, unit_env):
        """Targets without votes get a zero tally."""
        vote_service = await unit_env.get(VoteService)
        voted = await _seed_question(unit_env)
        unvoted = await _seed_question(unit_env)
        await vote_service.cast_vote(
            VotableType.QUESTION, voted.id, make_user().id, VoteType.UPVOTE
        )

        tallies = await vote_service.get_tallies(
            VotableType.QUESTION, [voted.id, unvoted.id]
        )

        assert tallies[voted.id].score == 1
        assert tallies[unvoted.id].score == 0

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        """No IDs, no tallies."""
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_tallies(VotableType.ANSWER, []) == {}
