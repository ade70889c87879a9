"""SQLAlchemy table definitions for the Q&A store.

Classical Core tables, mapped to domain models by hand in ``mappers``.
They match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("avatar_url", Text, nullable=True),
    Column("bio", String(500), nullable=True),
    Column("location", String(100), nullable=True),
    Column("website", String(200), nullable=True),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column("questions_asked", Integer, nullable=False, server_default="0"),
    Column("answers_given", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('user', 'admin')", name="users_role_valid"),
    CheckConstraint("reputation >= 0", name="users_reputation_non_negative"),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "tags",
        postgresql.ARRAY(String(30)),
        nullable=False,
        server_default=text("'{}'::varchar[]"),
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    # No FK: answers reference questions, and these point back
    Column("accepted_answer_id", UUID(as_uuid=True), nullable=True),
    Column("pinned_answer_id", UUID(as_uuid=True), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("cardinality(tags) <= 5", name="questions_max_tags"),
    CheckConstraint("views >= 0", name="questions_views_non_negative"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
# At most one accepted and one pinned answer per question
Index(
    "uq_answers_accepted_per_question",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted,
)
Index(
    "uq_answers_pinned_per_question",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_pinned,
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "answer_id",
        UUID(as_uuid=True),
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("content", String(500), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_answer_id", comments_table.c.answer_id)

# ============================================================================
# VOTES TABLE (one row per target and user)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("votable_type", String(20), nullable=False),
    Column("votable_id", UUID(as_uuid=True), nullable=False),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("vote_type", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("votable_type", "votable_id", "user_id", name="pk_votes"),
    CheckConstraint(
        "votable_type IN ('question', 'answer')", name="votes_votable_type_valid"
    ),
    CheckConstraint(
        "vote_type IN ('upvote', 'downvote')", name="votes_vote_type_valid"
    ),
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "recipient_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "sender_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(20), nullable=False),
    Column("message", String(500), nullable=False),
    Column("related_question_id", UUID(as_uuid=True), nullable=True),
    Column("related_answer_id", UUID(as_uuid=True), nullable=True),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("type IN ('answer', 'comment')", name="notifications_type_valid"),
    CheckConstraint("recipient_id <> sender_id", name="notifications_not_self"),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    postgresql_where=~notifications_table.c.is_read,
)
