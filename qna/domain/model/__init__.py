"""Domain model entities for the Q&A core."""

from qna.domain.model.answer import Answer
from qna.domain.model.comment import Comment
from qna.domain.model.notification import Notification
from qna.domain.model.question import Question
from qna.domain.model.user import User
from qna.domain.model.vote import Vote, tally_votes

__all__ = [
    "User",
    "Question",
    "Answer",
    "Comment",
    "Notification",
    "Vote",
    "tally_votes",
]
