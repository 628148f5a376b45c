"""SQLAlchemy table definitions for TopMeUp.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("display_name", String(100), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# LISTS TABLE
# ============================================================================
lists_table = Table(
    "lists",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(100), nullable=False),
    Column(
        "category",
        postgresql.ENUM(
            "movies", "music", "games", name="list_category", create_type=False
        ),
        nullable=False,
    ),
    Column("description", String(500), nullable=True),
    Column("items", JSONB, nullable=False, server_default="[]"),  # Ranked ListItems
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("views_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
)

Index("idx_lists_user_id", lists_table.c.user_id)
Index("idx_lists_created_at", lists_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# IDs come from an identity column so they grow with insertion order;
# the comment page cursor depends on that.
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, Identity(always=False), primary_key=True),
    Column("list_id", UUID, ForeignKey("lists.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=False),  # Author may no longer exist
    Column("content", Text, nullable=False),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column(
        "parent_comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 500", name="content_length_bounds"
    ),
)

Index("idx_comments_list_id_id", comments_table.c.list_id, comments_table.c.id.desc())
Index(
    "idx_comments_parent_comment_id_id",
    comments_table.c.parent_comment_id,
    comments_table.c.id,
)
