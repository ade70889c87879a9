"""Question aggregate root.

Votes and answers are not embedded: they live in their own collections
keyed by the question ID, and the vote score and answer count are derived
at read time.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator

from qna.domain.model.common import DomainModel, utcnow
from qna.domain.value import AnswerId, QuestionId, TagName, UserId

MAX_TAGS = 5

Title = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)
]
Description = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Question(DomainModel):
    """Question aggregate root.

    Business rules:
    - author_id never changes after creation
    - views only ever grows (one increment per detail fetch)
    - accepted_answer_id / pinned_answer_id, when set, reference an answer of
      this question whose is_accepted / is_pinned flag is set
    - deletion is soft (is_active=False) and does not cascade to answers
    """

    id: QuestionId
    title: Title
    description: Description  # Rich-text markup, stored verbatim
    tags: list[TagName] = Field(default_factory=list)
    author_id: UserId
    views: int = Field(default=0, ge=0)
    accepted_answer_id: Optional[AnswerId] = None
    pinned_answer_id: Optional[AnswerId] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("tags")
    @classmethod
    def deduplicate_tags(cls, tags: list[TagName]) -> list[TagName]:
        """Drop repeated tags, keeping first-seen order, then apply the limit."""
        seen: set[str] = set()
        unique = []
        for tag in tags:
            if tag.root not in seen:
                seen.add(tag.root)
                unique.append(tag)
        if len(unique) > MAX_TAGS:
            raise ValueError(f"At most {MAX_TAGS} tags are allowed")
        return unique
