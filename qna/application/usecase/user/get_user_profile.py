"""Get user profile use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.domain.model import User
from qna.domain.service import UserService
from qna.domain.value import UserId, UserRole


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class UserProfileResponse(BaseModel):
    """Public user profile (the email is never exposed)."""

    user_id: str
    username: str
    role: UserRole
    avatar_url: Optional[str]
    bio: Optional[str]
    location: Optional[str]
    website: Optional[str]
    reputation: int
    questions_asked: int
    answers_given: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfileResponse":
        return cls(
            user_id=str(user.id),
            username=user.username,
            role=user.role,
            avatar_url=user.avatar_url,
            bio=user.bio,
            location=user.location,
            website=user.website,
            reputation=user.reputation,
            questions_asked=user.questions_asked,
            answers_given=user.answers_given,
            created_at=user.created_at,
        )


class GetUserProfileUseCase:
    """Use case for reading a public user profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user is missing or deactivated
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserProfileResponse.from_user(user)
