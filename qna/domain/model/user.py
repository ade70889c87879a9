"""User aggregate root.

Accounts are created by the external identity/registration path. The Q&A
core only reads them, edits profile fields and bumps posting counters.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel, utcnow
from qna.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    email: Optional[str] = None  # Private, never exposed on public profiles
    role: UserRole = UserRole.USER
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    website: Optional[str] = Field(default=None, max_length=200)
    reputation: int = Field(default=0, ge=0)
    questions_asked: int = Field(default=0, ge=0)
    answers_given: int = Field(default=0, ge=0)
    is_active: bool = True  # Owned by the account-management path
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
