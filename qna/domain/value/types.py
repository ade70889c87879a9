"""Domain value objects for the Q&A core.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and small pieces of derived logic.
"""

import math
import re
from enum import Enum

from pydantic import Field, computed_field, field_validator

from qna.domain.value.common import RootValueObject, ValueObject
from qna.domain.value.identifiers import UserId


class VoteType(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class UserRole(str, Enum):
    """Role attached to a verified identity."""

    USER = "user"
    ADMIN = "admin"


class NotificationType(str, Enum):
    """Event that produced a notification."""

    ANSWER = "answer"
    COMMENT = "comment"


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # derived vote score DESC
    VIEWS = "views"  # view counter DESC


class TagName(RootValueObject[str]):
    """Question tag.

    Input is trimmed and lowercased before validation, so "  Python " and
    "python" are the same tag. Allowed: lowercase letters, digits and
    ``+ # . -`` (for tags like ``c++``, ``c#`` or ``node.js``), 1-30 chars.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        if not re.match(r"^[a-z0-9][a-z0-9+#.\-]{0,29}$", v):
            raise ValueError(
                "Tag must be 1-30 characters: letters, digits, '+', '#', '.', '-'"
            )
        return v


class VoteTally(ValueObject):
    """Vote counts for one target.

    ``score`` is derived on every read and never stored.
    """

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @computed_field
    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


class Actor(ValueObject):
    """Verified identity of the caller, as produced by the identity provider."""

    user_id: UserId
    username: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def can_moderate(self, author_id: UserId) -> bool:
        """Whether the actor may delete content owned by ``author_id``."""
        return self.user_id == author_id or self.is_admin


class Pagination(ValueObject):
    """Offset pagination metadata."""

    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    has_next: bool
    has_prev: bool

    @classmethod
    def from_counts(cls, page: int, page_size: int, total_count: int) -> "Pagination":
        """Build pagination metadata for one page of ``total_count`` items."""
        total_pages = math.ceil(total_count / page_size)
        return cls(
            current_page=page,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size
