"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.repository import UserRepository
from qna.domain.service import UserService
from qna.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_get_existing_user(self, unit_env):
        """Active users are returned."""
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        result = await service.get_by_id(user.id)

        assert result.username == "alice"

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        """Unknown users raise NotFoundError."""
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_deactivated_user(self, unit_env):
        """Deactivated accounts look missing."""
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("gone", is_active=False))

        with pytest.raises(NotFoundError):
            await service.get_by_id(user.id)


class TestGetByIds:
    """Tests for get_by_ids method."""

    @pytest.mark.asyncio
    async def test_unknown_ids_are_left_out(self, unit_env):
        """Only resolvable users appear in the mapping."""
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        missing = UserId(uuid4())

        users = await service.get_by_ids([alice.id, missing, alice.id])

        assert list(users) == [alice.id]


class TestCounters:
    """Tests for the posting counters."""

    @pytest.mark.asyncio
    async def test_counters_survive_profile_updates(self, unit_env):
        """Profile saves never overwrite the counters."""
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        await service.increment_questions_asked(user.id)
        await service.increment_answers_given(user.id)
        await service.increment_answers_given(user.id)
        await user_repo.save(user.model_copy(update={"bio": "stale copy"}))

        stored = await user_repo.find_by_id(user.id)
        assert stored.questions_asked == 1
        assert stored.answers_given == 2
        assert stored.bio == "stale copy"


class TestUpdateProfile:
    """Tests for update_profile method."""

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self, unit_env):
        """Fields left as None keep their value."""
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice", location="Berlin"))

        updated = await service.update_profile(user.id, bio="  Rustacean  ")

        assert updated.bio == "Rustacean"
        assert updated.location == "Berlin"

    @pytest.mark.asyncio
    async def test_empty_string_is_stored(self, unit_env):
        """An empty string is stored as given."""
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice", website="https://a.dev"))

        updated = await service.update_profile(user.id, website="")

        assert updated.website == ""

    @pytest.mark.asyncio
    async def test_bio_too_long(self, unit_env):
        """Oversized fields raise ValidationError."""
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        with pytest.raises(ValidationError):
            await service.update_profile(user.id, bio="x" * 501)

        assert (await user_repo.find_by_id(user.id)).bio is None

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        """Unknown users raise NotFoundError."""
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.update_profile(UserId(uuid4()), bio="hi")
