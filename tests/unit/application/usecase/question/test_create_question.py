"""Unit tests for CreateQuestionUseCase."""

import pytest

from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
)
from qna.domain.error import ValidationError
from qna.domain.repository import UserRepository
from tests.conftest import actor_for, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_question_bumps_author_counter(self, unit_env):
        """Asking a question increments questions_asked."""
        use_case = await unit_env.get(CreateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("asker"))

        response = await use_case.execute(
            CreateQuestionRequest(
                title="How do I reverse a list?",
                description="<p>In place, ideally.</p>",
                tags=["Python", "lists"],
                actor=actor_for(author),
            )
        )

        assert response.question_id
        assert response.author_id == str(author.id)
        assert response.tags == ["python", "lists"]
        assert (await user_repo.find_by_id(author.id)).questions_asked == 1

    @pytest.mark.asyncio
    async def test_invalid_question_leaves_counter_alone(self, unit_env):
        """A rejected question is not counted."""
        use_case = await unit_env.get(CreateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("asker"))

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateQuestionRequest(
                    title="", description="Body", actor=actor_for(author)
                )
            )

        assert (await user_repo.find_by_id(author.id)).questions_asked == 0
