"""SQLAlchemy table definitions for ballot.

These match the schema created by the Alembic migrations. Column types are
kept dialect-neutral so the same tables run on PostgreSQL and SQLite.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)

metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the account subsystem)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("handle", String(255), nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

# ============================================================================
# TOKENS TABLE (owned by the account subsystem)
# ============================================================================
tokens_table = Table(
    "tokens",
    metadata,
    Column("value", String(255), primary_key=True),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column("expires_at", DateTime(timezone=True), nullable=True),
)

Index("idx_tokens_user_id", tokens_table.c.user_id)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "author_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "article_id",
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("body", Text, nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "votable_type",
        Enum("article", "comment", name="votable_type"),
        nullable=False,
    ),
    # Polymorphic: points at articles.id or comments.id, so no foreign key
    Column("votable_id", Integer, nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    # One vote per user per item; the vote service relies on this
    UniqueConstraint("user_id", "votable_type", "votable_id", name="unique_vote"),
)

Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)
