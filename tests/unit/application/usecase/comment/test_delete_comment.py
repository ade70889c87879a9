"""Unit tests for DeleteCommentUseCase."""

import pytest

from qna.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from qna.domain.error import ForbiddenError
from qna.domain.repository import CommentRepository
from qna.domain.value import UserRole
from tests.conftest import actor_for, make_answer, make_comment, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        """Admins may remove any comment."""
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        answer = make_answer(make_question(make_user("asker")), make_user("helper"))
        comment = await comment_repo.save(make_comment(answer, make_user("c")))
        admin = make_user("admin", role=UserRole.ADMIN)

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), actor=actor_for(admin))
        )

        assert response.deleted is True
        assert (await comment_repo.find_by_id(comment.id)).is_active is False

    @pytest.mark.asyncio
    async def test_stranger_is_forbidden(self, unit_env):
        """Regular users cannot delete other people's comments."""
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        answer = make_answer(make_question(make_user("asker")), make_user("helper"))
        comment = await comment_repo.save(make_comment(answer, make_user("c")))

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=str(comment.id), actor=actor_for(make_user("x"))
                )
            )
