"""Unit tests for DeleteAnswerUseCase."""

import pytest

from qna.application.usecase.answer import DeleteAnswerRequest, DeleteAnswerUseCase
from qna.domain.error import NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from tests.conftest import actor_for, make_answer, make_comment, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteAnswerUseCase:
    """Tests for DeleteAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_reports_cascaded_comments(self, unit_env):
        """The response counts the comments removed with the answer."""
        use_case = await unit_env.get(DeleteAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)
        helper = make_user("helper")
        question = await question_repo.save(make_question(make_user("asker")))
        answer = await answer_repo.save(make_answer(question, helper))
        for _ in range(2):
            await comment_repo.save(make_comment(answer, make_user("c")))

        response = await use_case.execute(
            DeleteAnswerRequest(answer_id=str(answer.id), actor=actor_for(helper))
        )

        assert response.deleted is True
        assert response.comments_deleted == 2
        assert await comment_repo.find_by_answers([answer.id]) == []

    @pytest.mark.asyncio
    async def test_second_delete_is_not_found(self, unit_env):
        """Deleting twice reports the answer as missing."""
        use_case = await unit_env.get(DeleteAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        helper = make_user("helper")
        question = await question_repo.save(make_question(make_user("asker")))
        answer = await answer_repo.save(make_answer(question, helper))
        request = DeleteAnswerRequest(answer_id=str(answer.id), actor=actor_for(helper))

        await use_case.execute(request)

        with pytest.raises(NotFoundError):
            await use_case.execute(request)
