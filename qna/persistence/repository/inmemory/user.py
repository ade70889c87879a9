"""In-memory user repository for testing."""

from typing import List, Optional, Sequence

from qna.domain.model.user import User
from qna.domain.repository.user import UserRepository
from qna.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def save(self, user: User) -> User:
        """Save or update a user, keeping the stored counters."""
        existing = self._users.get(user.id)
        if existing:
            user = user.model_copy(
                update={
                    "questions_asked": existing.questions_asked,
                    "answers_given": existing.answers_given,
                    "reputation": existing.reputation,
                }
            )
        self._users[user.id] = user
        return user

    async def increment_questions_asked(self, user_id: UserId) -> None:
        """Increment questions_asked by 1."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"questions_asked": user.questions_asked + 1}
            )

    async def increment_answers_given(self, user_id: UserId) -> None:
        """Increment answers_given by 1."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"answers_given": user.answers_given + 1}
            )
