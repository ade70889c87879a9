"""Unit tests for the user profile use cases."""

from uuid import uuid4

import pytest

from qna.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.repository import UserRepository
from tests.conftest import actor_for, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_hides_email(self, unit_env):
        """Public profiles never include the email address."""
        use_case = await unit_env.get(GetUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(
            make_user("alice", email="alice@example.com", bio="Hi")
        )

        response = await use_case.execute(GetUserProfileRequest(user_id=str(user.id)))

        assert response.username == "alice"
        assert response.bio == "Hi"
        assert "email" not in response.model_dump()

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(user_id=str(uuid4())))


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_updates_callers_own_profile(self, unit_env):
        """The caller's profile changes, nobody else's."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))

        response = await use_case.execute(
            UpdateUserProfileRequest(
                actor=actor_for(alice), location="Lisbon", website="https://a.dev"
            )
        )

        assert response.user_id == str(alice.id)
        assert response.location == "Lisbon"
        assert response.website == "https://a.dev"
        assert (await user_repo.find_by_id(bob.id)).location is None
