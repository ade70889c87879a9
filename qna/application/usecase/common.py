"""Response fragments shared by several use cases."""

from typing import Optional

from pydantic import BaseModel

from qna.domain.model import User
from qna.domain.value import UserId


class AuthorSummary(BaseModel):
    """Public author details embedded in questions, answers and comments."""

    user_id: str
    username: Optional[str] = None  # None when the account no longer resolves
    avatar_url: Optional[str] = None
    reputation: int = 0

    @classmethod
    def of(cls, user_id: UserId, user: Optional[User]) -> "AuthorSummary":
        if user is None:
            return cls(user_id=str(user_id))
        return cls(
            user_id=str(user.id),
            username=user.username,
            avatar_url=user.avatar_url,
            reputation=user.reputation,
        )
