"""Unit tests for CreateCommentUseCase."""

import asyncio

import pytest

from qna.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import Notification
from qna.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UnitOfWork,
)
from qna.domain.service import AnswerService, CommentService, NotificationService
from qna.domain.value import NotificationType
from qna.persistence.repository.inmemory import InMemoryNotificationRepository
from tests.conftest import actor_for, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class CancelledNotificationRepository(InMemoryNotificationRepository):
    """Notification store whose write is cancelled."""

    async def save(self, notification: Notification) -> Notification:
        raise asyncio.CancelledError()


async def _seed_answer(unit_env, helper, **overrides):
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)
    question = await question_repo.save(make_question(make_user("asker")))
    return await answer_repo.save(make_answer(question, helper, **overrides))


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_notifies_answer_author(self, unit_env):
        """The answer's author gets a comment notification."""
        use_case = await unit_env.get(CreateCommentUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        helper, commenter = make_user("helper"), make_user("commenter")
        answer = await _seed_answer(unit_env, helper)

        response = await use_case.execute(
            CreateCommentRequest(
                answer_id=str(answer.id),
                content="  Could you add a source?  ",
                actor=actor_for(commenter),
            )
        )

        assert response.content == "Could you add a source?"
        notifications = await notification_repo.find_by_recipient(helper.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.COMMENT
        assert notifications[0].sender_id == commenter.id

    @pytest.mark.asyncio
    async def test_comment_on_own_answer_is_silent(self, unit_env):
        """Commenting on your own answer notifies no one."""
        use_case = await unit_env.get(CreateCommentUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        helper = make_user("helper")
        answer = await _seed_answer(unit_env, helper)

        await use_case.execute(
            CreateCommentRequest(
                answer_id=str(answer.id), content="Edit: fixed", actor=actor_for(helper)
            )
        )

        assert await notification_repo.count_unread(helper.id) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "x" * 501])
    async def test_invalid_content(self, unit_env, content):
        """Comments must hold 1 to 500 characters."""
        use_case = await unit_env.get(CreateCommentUseCase)
        answer = await _seed_answer(unit_env, make_user("helper"))

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    answer_id=str(answer.id),
                    content=content,
                    actor=actor_for(make_user("commenter")),
                )
            )

    @pytest.mark.asyncio
    async def test_comment_on_deleted_answer(self, unit_env):
        """Deleted answers cannot be commented on."""
        use_case = await unit_env.get(CreateCommentUseCase)
        answer = await _seed_answer(unit_env, make_user("helper"), is_active=False)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    answer_id=str(answer.id),
                    content="Hello?",
                    actor=actor_for(make_user("commenter")),
                )
            )

    @pytest.mark.asyncio
    async def test_comment_survives_cancelled_dispatch(self, unit_env):
        """The comment is committed before the notification is attempted."""
        comment_service = await unit_env.get(CommentService)
        unit_of_work = await unit_env.get(UnitOfWork)
        use_case = CreateCommentUseCase(
            answer_service=await unit_env.get(AnswerService),
            comment_service=comment_service,
            notification_service=NotificationService(
                CancelledNotificationRepository()
            ),
            unit_of_work=unit_of_work,
        )
        answer = await _seed_answer(unit_env, make_user("helper"))

        with pytest.raises(asyncio.CancelledError):
            await use_case.execute(
                CreateCommentRequest(
                    answer_id=str(answer.id),
                    content="Nice one.",
                    actor=actor_for(make_user("commenter")),
                )
            )

        assert unit_of_work.commits == 1
        comments = await comment_service.get_active_comments([answer.id])
        assert [c.content for c in comments[answer.id]] == ["Nice one."]
