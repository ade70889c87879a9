"""Comment entity.

Comments are flat, short remarks attached to an answer.
"""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StringConstraints

from qna.domain.model.common import DomainModel, utcnow
from qna.domain.value import AnswerId, CommentId, UserId

MAX_COMMENT_LENGTH = 500


class Comment(DomainModel):
    """Comment on an answer."""

    id: CommentId
    answer_id: AnswerId
    author_id: UserId
    content: Annotated[
        str,
        StringConstraints(
            strip_whitespace=True, min_length=1, max_length=MAX_COMMENT_LENGTH
        ),
    ]
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
