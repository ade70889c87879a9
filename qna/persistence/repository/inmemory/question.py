"""In-memory question repository for testing."""

from typing import List, Optional, Sequence

from qna.domain.model.common import utcnow
from qna.domain.model.question import Question
from qna.domain.repository.question import QuestionRepository
from qna.domain.value import AnswerId, QuestionId, QuestionSortOrder, TagName


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID (single event loop, nothing to lock)."""
        return self._questions.get(question_id)

    def _filter(
        self,
        search: Optional[str],
        tags: Optional[Sequence[TagName]],
        include_inactive: bool,
    ) -> List[Question]:
        questions = list(self._questions.values())

        if not include_inactive:
            questions = [q for q in questions if q.is_active]

        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.description.lower()
            ]

        if tags:
            wanted = {tag.root for tag in tags}
            questions = [
                q for q in questions if wanted.intersection(t.root for t in q.tags)
            ]

        return questions

    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[TagName]] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        include_inactive: bool = False,
        limit: Optional[int] = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering, ordering and pagination."""
        questions = self._filter(search, tags, include_inactive)

        if sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: (q.views, q.created_at), reverse=True)
        else:
            questions.sort(key=lambda q: q.created_at, reverse=True)

        if limit is None:
            return questions[offset:]
        return questions[offset : offset + limit]

    async def count(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[TagName]] = None,
        include_inactive: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._filter(search, tags, include_inactive))

    async def save(self, question: Question) -> Question:
        """Save or update a question, keeping the stored view count."""
        existing = self._questions.get(question.id)
        if existing:
            question = question.model_copy(update={"views": existing.views})
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )

    async def update_if_active(
        self, question_id: QuestionId, **values
    ) -> Optional[Question]:
        """Set fields on an active question."""
        question = self._questions.get(question_id)
        if not question or not question.is_active:
            return None
        updated = question.model_copy(update={**values, "updated_at": utcnow()})
        self._questions[question_id] = updated
        return updated

    async def clear_answer_references(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> None:
        """Unset the accepted/pinned answer where it is answer_id."""
        question = self._questions.get(question_id)
        if not question:
            return
        changes = {}
        if question.accepted_answer_id == answer_id:
            changes["accepted_answer_id"] = None
        if question.pinned_answer_id == answer_id:
            changes["pinned_answer_id"] = None
        if changes:
            self._questions[question_id] = question.model_copy(update=changes)
