"""User profile routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from qna.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UserProfileResponse,
)
from qna.interface.api.auth import CurrentActor

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None


@router.patch("/me", response_model=UserProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    actor: CurrentActor,
    use_case: FromDishka[UpdateUserProfileUseCase],
) -> UserProfileResponse:
    """Update the caller's bio, location and website."""
    return await use_case.execute(
        UpdateUserProfileRequest(
            actor=actor,
            bio=request.bio,
            location=request.location,
            website=request.website,
        )
    )


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: UUID, use_case: FromDishka[GetUserProfileUseCase]
) -> UserProfileResponse:
    """Get a public user profile."""
    return await use_case.execute(GetUserProfileRequest(user_id=str(user_id)))
