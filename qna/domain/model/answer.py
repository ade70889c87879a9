"""Answer entity."""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StringConstraints

from qna.domain.model.common import DomainModel, utcnow
from qna.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    At most one answer per question has is_accepted set and at most one has
    is_pinned set; the two flags are independent. Both are maintained by the
    acceptance service together with the question's back-references.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    is_accepted: bool = False
    is_pinned: bool = False
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
