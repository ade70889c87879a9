"""List questions use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.common import AuthorSummary
from qna.config import ListingSettings
from qna.domain.error import ValidationError
from qna.domain.service import ListingService
from qna.domain.value import Pagination, QuestionSortOrder


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    title: str
    description: str
    tags: list[str]
    author: AuthorSummary
    views: int
    vote_score: int
    answer_count: int
    accepted_answer_id: Optional[str]
    created_at: datetime


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    search: Optional[str] = None
    tags: list[str] = Field(default_factory=list)  # Any-match
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    page: int = Field(default=1, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)  # None for the default size


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing questions with search, tags, sorting and paging."""

    def __init__(
        self, listing_service: ListingService, listing_settings: ListingSettings
    ) -> None:
        """Initialize list questions use case.

        Args:
            listing_service: Listing domain service
            listing_settings: Page size limits
        """
        self.listing_service = listing_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Raises:
            ValidationError: If the page size exceeds the configured maximum
                or a tag filter is malformed
        """
        page_size = request.limit or self.listing_settings.default_page_size
        if page_size > self.listing_settings.max_page_size:
            raise ValidationError(
                f"limit must be at most {self.listing_settings.max_page_size}"
            )

        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            page=request.page,
            page_size=page_size,
        ):
            result = await self.listing_service.list_questions(
                search=request.search,
                tags=request.tags,
                sort=request.sort,
                page=request.page,
                page_size=page_size,
            )

            items = [
                QuestionListItem(
                    question_id=str(summary.question.id),
                    title=summary.question.title,
                    description=summary.question.description,
                    tags=[tag.root for tag in summary.question.tags],
                    author=AuthorSummary.of(
                        summary.question.author_id, summary.author
                    ),
                    views=summary.question.views,
                    vote_score=summary.tally.score,
                    answer_count=summary.answer_count,
                    accepted_answer_id=(
                        str(summary.question.accepted_answer_id)
                        if summary.question.accepted_answer_id
                        else None
                    ),
                    created_at=summary.question.created_at,
                )
                for summary in result.items
            ]

            return ListQuestionsResponse(questions=items, pagination=result.pagination)
