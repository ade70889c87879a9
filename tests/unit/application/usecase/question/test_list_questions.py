"""Unit tests for ListQuestionsUseCase."""

import pytest

from qna.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from qna.domain.error import ValidationError
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.value import QuestionSortOrder
from tests.conftest import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_default_page_size(self, unit_env):
        """Without a limit the configured default of 10 applies."""
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user("asker")
        for minute in range(12):
            await question_repo.save(make_question(author, created_at=at(minute)))

        response = await use_case.execute(ListQuestionsRequest())

        assert len(response.questions) == 10
        assert response.pagination.page_size == 10
        assert response.pagination.total_pages == 2
        assert response.pagination.has_next is True

    @pytest.mark.asyncio
    async def test_limit_above_maximum_rejected(self, unit_env):
        """Page sizes above 100 are rejected."""
        use_case = await unit_env.get(ListQuestionsUseCase)

        with pytest.raises(ValidationError, match="at most 100"):
            await use_case.execute(ListQuestionsRequest(limit=101))

    @pytest.mark.asyncio
    async def test_items_carry_author_and_counts(self, unit_env):
        """Rows embed the author summary and answer count."""
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author = await user_repo.save(make_user("asker", reputation=42))
        question = await question_repo.save(make_question(author))
        await answer_repo.save(make_answer(question, make_user("helper")))

        response = await use_case.execute(
            ListQuestionsRequest(sort=QuestionSortOrder.VOTES, tags=["python"])
        )

        item = response.questions[0]
        assert item.question_id == str(question.id)
        assert item.author.username == "asker"
        assert item.author.reputation == 42
        assert item.answer_count == 1
        assert item.vote_score == 0
        assert item.tags == ["python"]
