"""Unit tests for DeletionService."""

import pytest

from qna.domain.error import ForbiddenError, NotFoundError
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from qna.domain.service import DeletionService
from qna.domain.value import UserRole
from tests.conftest import (
    actor_for,
    make_answer,
    make_comment,
    make_question,
    make_user,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_thread(unit_env, asker, helper, comment_count: int = 2):
    question = await (await unit_env.get(QuestionRepository)).save(
        make_question(asker)
    )
    answer = await (await unit_env.get(AnswerRepository)).save(
        make_answer(question, helper)
    )
    comment_repo = await unit_env.get(CommentRepository)
    comments = [
        await comment_repo.save(make_comment(answer, make_user(f"commenter{i}")))
        for i in range(comment_count)
    ]
    return question, answer, comments


class TestDeleteQuestion:
    """Tests for delete_question method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """Deletion clears is_active and keeps the row."""
        service = await unit_env.get(DeletionService)
        question_repo = await unit_env.get(QuestionRepository)
        asker = make_user("asker")
        question, _, _ = await _seed_thread(unit_env, asker, make_user("helper"))

        deleted = await service.delete_question(question.id, actor_for(asker))

        assert deleted.is_active is False
        stored = await question_repo.find_by_id(question.id)
        assert stored is not None
        assert stored.is_active is False

    @pytest.mark.asyncio
    async def test_answers_survive_question_deletion(self, unit_env):
        """Question deletion does not cascade."""
        service = await unit_env.get(DeletionService)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)
        asker = make_user("asker")
        question, answer, comments = await _seed_thread(
            unit_env, asker, make_user("helper")
        )

        await service.delete_question(question.id, actor_for(asker))

        assert (await answer_repo.find_by_id(answer.id)).is_active is True
        for comment in comments:
            assert (await comment_repo.find_by_id(comment.id)).is_active is True

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        """Admins may delete anyone's question."""
        service = await unit_env.get(DeletionService)
        question, _, _ = await _seed_thread(
            unit_env, make_user("asker"), make_user("helper")
        )
        admin = make_user("admin", role=UserRole.ADMIN)

        deleted = await service.delete_question(question.id, actor_for(admin))

        assert deleted.is_active is False

    @pytest.mark.asyncio
    async def test_stranger_is_forbidden(self, unit_env):
        """Other users cannot delete the question."""
        service = await unit_env.get(DeletionService)
        question_repo = await unit_env.get(QuestionRepository)
        question, _, _ = await _seed_thread(
            unit_env, make_user("asker"), make_user("helper")
        )

        with pytest.raises(ForbiddenError):
            await service.delete_question(question.id, actor_for(make_user("x")))

        assert (await question_repo.find_by_id(question.id)).is_active is True

    @pytest.mark.asyncio
    async def test_deleting_twice_reports_not_found(self, unit_env):
        """A deleted question is indistinguishable from a missing one."""
        service = await unit_env.get(DeletionService)
        asker = make_user("asker")
        question, _, _ = await _seed_thread(unit_env, asker, make_user("helper"))

        await service.delete_question(question.id, actor_for(asker))

        with pytest.raises(NotFoundError):
            await service.delete_question(question.id, actor_for(asker))


class TestDeleteAnswer:
    """Tests for delete_answer method."""

    @pytest.mark.asyncio
    async def test_comments_are_deactivated_with_the_answer(self, unit_env):
        """Deleting an answer cascades to its comments."""
        service = await unit_env.get(DeletionService)
        comment_repo = await unit_env.get(CommentRepository)
        helper = make_user("helper")
        _, answer, comments = await _seed_thread(
            unit_env, make_user("asker"), helper, comment_count=3
        )

        deleted, comment_count = await service.delete_answer(
            answer.id, actor_for(helper)
        )

        assert deleted.is_active is False
        assert comment_count == 3
        for comment in comments:
            assert (await comment_repo.find_by_id(comment.id)).is_active is False

    @pytest.mark.asyncio
    async def test_already_deleted_comments_are_not_counted(self, unit_env):
        """The count covers comments that were still active."""
        service = await unit_env.get(DeletionService)
        helper = make_user("helper")
        _, answer, comments = await _seed_thread(
            unit_env, make_user("asker"), helper, comment_count=2
        )
        await service.delete_comment(comments[0].id, actor_for(helper, UserRole.ADMIN))

        _, comment_count = await service.delete_answer(answer.id, actor_for(helper))

        assert comment_count == 1

    @pytest.mark.asyncio
    async def test_question_author_cannot_delete_answer(self, unit_env):
        """Asking the question grants no rights over its answers."""
        service = await unit_env.get(DeletionService)
        asker = make_user("asker")
        _, answer, _ = await _seed_thread(unit_env, asker, make_user("helper"))

        with pytest.raises(ForbiddenError):
            await service.delete_answer(answer.id, actor_for(asker))

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        """Admins may delete anyone's answer."""
        service = await unit_env.get(DeletionService)
        _, answer, _ = await _seed_thread(
            unit_env, make_user("asker"), make_user("helper"), comment_count=0
        )
        admin = make_user("admin", role=UserRole.ADMIN)

        deleted, comment_count = await service.delete_answer(
            answer.id, actor_for(admin)
        )

        assert deleted.is_active is False
        assert comment_count == 0

    @pytest.mark.asyncio
    async def test_deleted_answer_is_no_longer_accepted_or_pinned(self, unit_env):
        """The question stops pointing at an answer once it is deleted."""
        service = await unit_env.get(DeletionService)
        question_repo = await unit_env.get(QuestionRepository)
        helper = make_user("helper")
        question, answer, _ = await _seed_thread(
            unit_env, make_user("asker"), helper, comment_count=0
        )
        await question_repo.save(
            question.model_copy(
                update={"accepted_answer_id": answer.id, "pinned_answer_id": answer.id}
            )
        )

        await service.delete_answer(answer.id, actor_for(helper))

        stored = await question_repo.find_by_id(question.id)
        assert stored.accepted_answer_id is None
        assert stored.pinned_answer_id is None

    @pytest.mark.asyncio
    async def test_other_answers_keep_their_flags(self, unit_env):
        """Deleting one answer leaves another answer's pin in place."""
        service = await unit_env.get(DeletionService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        helper = make_user("helper")
        question, answer, _ = await _seed_thread(
            unit_env, make_user("asker"), helper, comment_count=0
        )
        pinned = await answer_repo.save(
            make_answer(question, make_user("other"), is_pinned=True)
        )
        await question_repo.save(
            question.model_copy(
                update={"accepted_answer_id": answer.id, "pinned_answer_id": pinned.id}
            )
        )

        await service.delete_answer(answer.id, actor_for(helper))

        stored = await question_repo.find_by_id(question.id)
        assert stored.accepted_answer_id is None
        assert stored.pinned_answer_id == pinned.id


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """Comment authors may delete their comments."""
        service = await unit_env.get(DeletionService)
        comment_repo = await unit_env.get(CommentRepository)
        commenter = make_user("commenter")
        _, answer, _ = await _seed_thread(
            unit_env, make_user("asker"), make_user("helper"), comment_count=0
        )
        comment = await comment_repo.save(make_comment(answer, commenter))

        deleted = await service.delete_comment(comment.id, actor_for(commenter))

        assert deleted.is_active is False

    @pytest.mark.asyncio
    async def test_answer_author_cannot_delete_comment(self, unit_env):
        """Owning the answer grants no rights over its comments."""
        service = await unit_env.get(DeletionService)
        helper = make_user("helper")
        _, _, comments = await _seed_thread(unit_env, make_user("asker"), helper)

        with pytest.raises(ForbiddenError):
            await service.delete_comment(comments[0].id, actor_for(helper))

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        """Deleting a deleted comment reports it as missing."""
        service = await unit_env.get(DeletionService)
        commenter = make_user("commenter")
        comment_repo = await unit_env.get(CommentRepository)
        _, answer, _ = await _seed_thread(
            unit_env, make_user("asker"), make_user("helper"), comment_count=0
        )
        comment = await comment_repo.save(
            make_comment(answer, commenter, is_active=False)
        )

        with pytest.raises(NotFoundError, match="Comment not found"):
            await service.delete_comment(comment.id, actor_for(commenter))
