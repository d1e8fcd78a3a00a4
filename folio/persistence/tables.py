"""SQLAlchemy table definitions for Folio.

Tables mirror the document collections the domain expects: one row per
entity, no foreign keys and no cascades. Parent links are plain columns.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("title", Text, nullable=False),
    Column("source", Text, nullable=True),
    Column("user_id", String(64), nullable=True),
    Column("tags", ARRAY(String), nullable=False, server_default="{}"),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("published", TIMESTAMP(timezone=False), nullable=False),
    Column("changed", TIMESTAMP(timezone=False), nullable=False),
)

Index("idx_posts_user_id", posts_table.c.user_id)
Index("idx_posts_title", posts_table.c.title)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("text", Text, nullable=False, server_default=""),
    Column("user_id", String(64), nullable=True),
    Column("post_id", String(64), nullable=False),
    Column("comment_id", String(64), nullable=True),  # Replied-to comment
    Column("created_date", TIMESTAMP(timezone=False), nullable=False),
    Column("modification_date", TIMESTAMP(timezone=False), nullable=False),
)

Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# RATINGS TABLE
# ============================================================================
ratings_table = Table(
    "ratings",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("user_id", String(64), nullable=True),
    Column("post_id", String(64), nullable=False),
    Column("published", TIMESTAMP(timezone=False), nullable=False),
)

# No unique constraint on (user_id, post_id): replacement is done by the service
Index("idx_ratings_user_post", ratings_table.c.user_id, ratings_table.c.post_id)
Index("idx_ratings_post_id", ratings_table.c.post_id)

# ============================================================================
# NODES TABLE
# ============================================================================
nodes_table = Table(
    "nodes",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("parent_id", String(64), nullable=False),
    Column("parent_type", String(20), nullable=False),  # 'post', 'comment', 'node'
    Column("user_id", String(64), nullable=True),
    Column("type", String(20), nullable=False, server_default="text"),
    Column("content", Text, nullable=False, server_default=""),
    Column("source", Text, nullable=True),
    Column("created_date", TIMESTAMP(timezone=False), nullable=False),
    Column("modification_date", TIMESTAMP(timezone=False), nullable=False),
)

Index("idx_nodes_parent_id", nodes_table.c.parent_id)
