"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UserProfileResponse",
]
