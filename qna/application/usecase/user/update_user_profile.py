"""Update user profile use case."""

from typing import Optional

from pydantic import BaseModel

from qna.domain.service import UserService
from qna.domain.value import Actor

from .get_user_profile import UserProfileResponse


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Fields left as None keep their current value. Length limits are
    enforced by the user model.
    """

    actor: Actor  # Only the caller's own profile can be updated
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None


class UpdateUserProfileUseCase:
    """Use case for updating the caller's bio, location and website.

    Username, role and counters cannot be changed through this endpoint.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If the caller's account is missing or deactivated
            ValidationError: If a field exceeds its length limit
        """
        user = await self.user_service.update_profile(
            request.actor.user_id,
            bio=request.bio,
            location=request.location,
            website=request.website,
        )
        return UserProfileResponse.from_user(user)
