"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from qna.config import AuthSettings
from qna.domain.service import JWTService
from qna.domain.value import UserRole
from qna.util.jwt import JWTError
from tests.conftest import mint_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="unit-test-secret-0123456789abcdef0123")


class TestGetActor:
    """Tests for get_actor method."""

    def test_valid_token(self, auth_settings):
        """A signed token yields the caller identity."""
        service = JWTService(auth_settings)
        user_id = uuid4()
        token = mint_token(str(user_id), "alice", auth_settings, role="admin")

        actor = service.get_actor(token)

        assert actor.user_id == user_id
        assert actor.username == "alice"
        assert actor.role == UserRole.ADMIN
        assert actor.is_admin

    def test_wrong_secret(self, auth_settings):
        """Tokens signed with another secret are rejected."""
        service = JWTService(auth_settings)
        token = mint_token(
            str(uuid4()),
            "mallory",
            AuthSettings(jwt_secret="another-secret-0123456789abcdef0123"),
        )

        with pytest.raises(JWTError, match="Invalid token"):
            service.get_actor(token)

    def test_expired_token(self, auth_settings):
        """Expired tokens are rejected."""
        service = JWTService(auth_settings)
        token = mint_token(
            str(uuid4()), "alice", auth_settings, expires_in=timedelta(days=-1)
        )

        with pytest.raises(JWTError, match="expired"):
            service.get_actor(token)

    def test_malformed_user_id(self, auth_settings):
        """A user_id that is not a UUID is rejected."""
        service = JWTService(auth_settings)
        token = mint_token("not-a-uuid", "alice", auth_settings)

        with pytest.raises(JWTError, match="malformed"):
            service.get_actor(token)

    def test_unknown_role(self, auth_settings):
        """Roles outside user/admin are rejected."""
        service = JWTService(auth_settings)
        token = mint_token(str(uuid4()), "alice", auth_settings, role="root")

        with pytest.raises(JWTError, match="malformed"):
            service.get_actor(token)
