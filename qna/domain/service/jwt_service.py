"""JWT token domain service."""

from uuid import UUID

import logfire

from qna.config import AuthSettings
from qna.domain.value import Actor, UserId, UserRole
from qna.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying identity tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_actor(self, token: str) -> Actor:
        """Turn a verified token into the caller identity.

        Raises:
            JWTError: If token is invalid, expired or carries malformed claims
        """
        payload = self.verify_token(token)
        try:
            return Actor(
                user_id=UserId(UUID(payload.user_id)),
                username=payload.username,
                role=UserRole(payload.role),
            )
        except ValueError:
            raise JWTError("Token carries malformed claims")
