"""Unit tests for CastVoteUseCase."""

import pytest

from qna.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from qna.domain.repository import QuestionRepository
from qna.domain.value import VotableType, VoteType
from tests.conftest import actor_for, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_switching_direction(self, unit_env):
        """Up then down from the same user leaves a single downvote."""
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user("asker")))
        voter = actor_for(make_user("voter"))

        await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=str(question.id),
                vote_type=VoteType.UPVOTE,
                actor=voter,
            )
        )
        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=str(question.id),
                vote_type=VoteType.DOWNVOTE,
                actor=voter,
            )
        )

        assert response.vote_type == VoteType.DOWNVOTE
        assert response.upvotes == 0
        assert response.downvotes == 1
        assert response.vote_score == -1
