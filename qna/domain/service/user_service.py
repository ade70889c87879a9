"""User domain service."""

from typing import Dict, Optional, Sequence

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import User
from qna.domain.model.common import utcnow
from qna.domain.repository import UserRepository
from qna.domain.value import UserId

from .base import Service, describe_validation_error


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get an active user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found or deactivated
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user or not user.is_active:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Load several users for author summaries.

        Unknown IDs are left out of the result; callers render them as
        missing authors rather than failing the whole read.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        with logfire.span("user_service.get_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def increment_questions_asked(self, user_id: UserId) -> None:
        """Bump the author's question counter."""
        await self.user_repository.increment_questions_asked(user_id)

    async def increment_answers_given(self, user_id: UserId) -> None:
        """Bump the author's answer counter."""
        await self.user_repository.increment_answers_given(user_id)

    async def update_profile(
        self,
        user_id: UserId,
        bio: Optional[str] = None,
        location: Optional[str] = None,
        website: Optional[str] = None,
    ) -> User:
        """Update the profile fields that were provided.

        Args:
            user_id: User ID
            bio: New bio (None to keep the current one)
            location: New location (None to keep the current one)
            website: New website (None to keep the current one)

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found or deactivated
            ValidationError: If a field exceeds its length limit
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            changes = {
                field: value.strip()
                for field, value in (
                    ("bio", bio),
                    ("location", location),
                    ("website", website),
                )
                if value is not None
            }
            if not changes:
                return user

            # model_copy skips validation, so rebuild through the model
            try:
                updated = User.model_validate(
                    {**user.model_dump(), **changes, "updated_at": utcnow()}
                )
            except PydanticValidationError as e:
                raise ValidationError(describe_validation_error(e)) from e

            saved = await self.user_repository.save(updated)
            logfire.info(
                "User profile updated", user_id=str(user_id), fields=sorted(changes)
            )
            return saved
