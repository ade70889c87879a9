"""Unit tests for GetQuestionUseCase."""

from uuid import uuid4

import pytest

from qna.application.usecase.question import GetQuestionRequest, GetQuestionUseCase
from qna.domain.error import NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    UserRepository,
)
from tests.conftest import make_answer, make_comment, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetQuestionUseCase:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_detail_shape(self, unit_env):
        """The response nests answers and their comments."""
        use_case = await unit_env.get(GetQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)

        asker = await user_repo.save(make_user("asker"))
        helper = await user_repo.save(make_user("helper"))
        question = await question_repo.save(make_question(asker))
        answer = await answer_repo.save(make_answer(question, helper))
        await comment_repo.save(make_comment(answer, asker, content="Thanks"))

        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        assert response.views == 1
        assert response.author.username == "asker"
        assert response.accepted_answer_id is None
        assert len(response.answers) == 1
        assert response.answers[0].author.username == "helper"
        assert response.answers[0].comments[0].content == "Thanks"
        assert response.answers[0].comments[0].author.username == "asker"

    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionRequest(question_id=str(uuid4())))
