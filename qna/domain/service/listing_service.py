"""Question listing and detail reads."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import ValidationError
from qna.domain.model import Answer, Comment, Question, User
from qna.domain.repository import QuestionRepository
from qna.domain.value import (
    Pagination,
    QuestionId,
    QuestionSortOrder,
    TagName,
    UserId,
    VotableType,
    VoteTally,
)

from .answer_service import AnswerService
from .base import Service, describe_validation_error
from .comment_service import CommentService
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import VoteService


@dataclass
class QuestionSummary:
    """One row of a question listing."""

    question: Question
    tally: VoteTally
    answer_count: int
    author: Optional[User]


@dataclass
class QuestionPage:
    """One page of a question listing."""

    items: List[QuestionSummary]
    pagination: Pagination


@dataclass
class CommentView:
    """A comment with its author."""

    comment: Comment
    author: Optional[User]


@dataclass
class AnswerThread:
    """An answer with its score, author and active comments."""

    answer: Answer
    tally: VoteTally
    author: Optional[User]
    comments: List[CommentView] = field(default_factory=list)


@dataclass
class QuestionDetail:
    """A question with its ordered answer threads."""

    question: Question
    tally: VoteTally
    author: Optional[User]
    answers: List[AnswerThread]


def order_answers(threads: Sequence[AnswerThread]) -> List[AnswerThread]:
    """Pinned answer first, then by descending score.

    The sort is stable, so answers that tie keep their incoming (creation)
    order.
    """
    return sorted(threads, key=lambda t: (not t.answer.is_pinned, -t.tally.score))


class ListingService(Service):
    """Read side of the Q&A core.

    Scores and answer counts are derived on every read from the vote and
    answer collections. Only active content is ever returned.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize listing service.

        Args:
            question_repository: Question repository
            question_service: Question domain service
            answer_service: Answer domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.question_repository = question_repository
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def list_questions(
        self,
        search: Optional[str] = None,
        tags: Sequence[str] = (),
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        page: int = 1,
        page_size: int = 10,
    ) -> QuestionPage:
        """List active questions.

        Args:
            search: Case-insensitive text matched literally against title or
                description
            tags: Tag names; a question matches if it has any of them
            sort: Sort order
            page: 1-based page number
            page_size: Questions per page

        Returns:
            The requested page (empty if past the last page) and its pagination

        Raises:
            ValidationError: If page, page size or a tag is invalid
        """
        if page < 1 or page_size < 1:
            raise ValidationError("page and page size must be at least 1")

        search = search.strip() if search else None
        tag_names = self._parse_tags(tags)

        with logfire.span(
            "listing_service.list_questions",
            search=search,
            tags=[t.root for t in tag_names],
            sort=sort.value,
            page=page,
            page_size=page_size,
        ):
            offset = (page - 1) * page_size

            if sort == QuestionSortOrder.VOTES:
                # The score is derived, so the whole filtered set is ranked here
                matching = await self.question_repository.find_all(
                    search=search, tags=tag_names, limit=None
                )
                tallies = await self.vote_service.get_tallies(
                    VotableType.QUESTION, [q.id for q in matching]
                )
                ranked = sorted(
                    matching,
                    key=lambda q: (tallies[q.id].score, q.created_at),
                    reverse=True,
                )
                total_count = len(ranked)
                questions = ranked[offset : offset + page_size]
            else:
                total_count = await self.question_repository.count(
                    search=search, tags=tag_names
                )
                questions = await self.question_repository.find_all(
                    search=search,
                    tags=tag_names,
                    sort=sort,
                    limit=page_size,
                    offset=offset,
                )
                tallies = await self.vote_service.get_tallies(
                    VotableType.QUESTION, [q.id for q in questions]
                )

            question_ids = [q.id for q in questions]
            answer_counts = await self.answer_service.count_active_answers(question_ids)
            authors = await self.user_service.get_by_ids(
                [q.author_id for q in questions]
            )

            items = [
                QuestionSummary(
                    question=q,
                    tally=tallies[q.id],
                    answer_count=answer_counts.get(q.id, 0),
                    author=authors.get(q.author_id),
                )
                for q in questions
            ]

            logfire.info(
                "Questions listed", count=len(items), total_count=total_count
            )
            return QuestionPage(
                items=items,
                pagination=Pagination.from_counts(page, page_size, total_count),
            )

    async def get_question_detail(self, question_id: QuestionId) -> QuestionDetail:
        """Fetch a question with its answers and comments, counting one view.

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        with logfire.span(
            "listing_service.get_question_detail", question_id=str(question_id)
        ):
            question = await self.question_service.get_active_question(question_id)
            question = await self.question_service.record_view(question)

            answers = await self.answer_service.get_active_answers(question.id)
            answer_ids = [a.id for a in answers]

            question_tally = await self.vote_service.get_tally(
                VotableType.QUESTION, question.id
            )
            answer_tallies = await self.vote_service.get_tallies(
                VotableType.ANSWER, answer_ids
            )
            comments = await self.comment_service.get_active_comments(answer_ids)

            author_ids: List[UserId] = [question.author_id]
            author_ids.extend(a.author_id for a in answers)
            author_ids.extend(
                c.author_id for thread in comments.values() for c in thread
            )
            authors: Dict[UserId, User] = await self.user_service.get_by_ids(
                author_ids
            )

            threads = [
                AnswerThread(
                    answer=answer,
                    tally=answer_tallies[answer.id],
                    author=authors.get(answer.author_id),
                    comments=[
                        CommentView(comment=c, author=authors.get(c.author_id))
                        for c in comments.get(answer.id, [])
                    ],
                )
                for answer in answers
            ]

            logfire.info(
                "Question detail fetched",
                question_id=str(question.id),
                views=question.views,
                answer_count=len(threads),
            )
            return QuestionDetail(
                question=question,
                tally=question_tally,
                author=authors.get(question.author_id),
                answers=order_answers(threads),
            )

    @staticmethod
    def _parse_tags(tags: Sequence[str]) -> List[TagName]:
        names = []
        for tag in tags:
            if not tag or not tag.strip():
                continue
            try:
                names.append(TagName(tag))
            except PydanticValidationError as e:
                raise ValidationError(describe_validation_error(e)) from e
        return names
