"""Get question detail use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.common import AuthorSummary
from qna.domain.service import AnswerThread, ListingService
from qna.domain.value import QuestionId


class CommentItem(BaseModel):
    """Comment under an answer."""

    comment_id: str
    content: str
    author: AuthorSummary
    created_at: datetime


class AnswerItem(BaseModel):
    """Answer in a question detail."""

    answer_id: str
    content: str
    author: AuthorSummary
    vote_score: int
    upvotes: int
    downvotes: int
    is_accepted: bool
    is_pinned: bool
    created_at: datetime
    comments: list[CommentItem]


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question_id: str
    title: str
    description: str
    tags: list[str]
    author: AuthorSummary
    views: int
    vote_score: int
    upvotes: int
    downvotes: int
    accepted_answer_id: Optional[str]
    pinned_answer_id: Optional[str]
    created_at: datetime
    updated_at: datetime
    answers: list[AnswerItem]


def _answer_item(thread: AnswerThread) -> AnswerItem:
    return AnswerItem(
        answer_id=str(thread.answer.id),
        content=thread.answer.content,
        author=AuthorSummary.of(thread.answer.author_id, thread.author),
        vote_score=thread.tally.score,
        upvotes=thread.tally.upvotes,
        downvotes=thread.tally.downvotes,
        is_accepted=thread.answer.is_accepted,
        is_pinned=thread.answer.is_pinned,
        created_at=thread.answer.created_at,
        comments=[
            CommentItem(
                comment_id=str(view.comment.id),
                content=view.comment.content,
                author=AuthorSummary.of(view.comment.author_id, view.author),
                created_at=view.comment.created_at,
            )
            for view in thread.comments
        ],
    )


class GetQuestionUseCase:
    """Use case for reading a question with its answers and comments.

    Every successful call counts one view.
    """

    def __init__(self, listing_service: ListingService) -> None:
        """Initialize get question use case.

        Args:
            listing_service: Listing domain service
        """
        self.listing_service = listing_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question is missing or deleted
        """
        with logfire.span("get_question.execute", question_id=request.question_id):
            detail = await self.listing_service.get_question_detail(
                QuestionId(UUID(request.question_id))
            )
            question = detail.question

            return GetQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                description=question.description,
                tags=[tag.root for tag in question.tags],
                author=AuthorSummary.of(question.author_id, detail.author),
                views=question.views,
                vote_score=detail.tally.score,
                upvotes=detail.tally.upvotes,
                downvotes=detail.tally.downvotes,
                accepted_answer_id=(
                    str(question.accepted_answer_id)
                    if question.accepted_answer_id
                    else None
                ),
                pinned_answer_id=(
                    str(question.pinned_answer_id)
                    if question.pinned_answer_id
                    else None
                ),
                created_at=question.created_at,
                updated_at=question.updated_at,
                answers=[_answer_item(thread) for thread in detail.answers],
            )
