"""initial_schema

Create the Folio document collections:
- Posts (titled documents with tags and a lifecycle status)
- Comments (on posts, optionally replying to another comment)
- Ratings (at most one per user and post, enforced by the service)
- Nodes (content blocks owned by a post, comment or node)

No foreign keys: parent links are plain columns and deletes are
cascaded by the domain services.

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 10:12:41.508213

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "posts",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("source", sa.Text(), nullable=True),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("published", postgresql.TIMESTAMP(timezone=False), nullable=False),
        sa.Column("changed", postgresql.TIMESTAMP(timezone=False), nullable=False),
    )
    op.create_index("idx_posts_user_id", "posts", ["user_id"])
    op.create_index("idx_posts_title", "posts", ["title"])

    op.create_table(
        "comments",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("text", sa.Text(), nullable=False, server_default=""),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("post_id", sa.String(64), nullable=False),
        sa.Column("comment_id", sa.String(64), nullable=True),
        sa.Column(
            "created_date", postgresql.TIMESTAMP(timezone=False), nullable=False
        ),
        sa.Column(
            "modification_date", postgresql.TIMESTAMP(timezone=False), nullable=False
        ),
    )
    op.create_index("idx_comments_user_id", "comments", ["user_id"])
    op.create_index("idx_comments_post_id", "comments", ["post_id"])

    op.create_table(
        "ratings",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("post_id", sa.String(64), nullable=False),
        sa.Column("published", postgresql.TIMESTAMP(timezone=False), nullable=False),
    )
    op.create_index("idx_ratings_user_post", "ratings", ["user_id", "post_id"])
    op.create_index("idx_ratings_post_id", "ratings", ["post_id"])

    op.create_table(
        "nodes",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("parent_id", sa.String(64), nullable=False),
        sa.Column("parent_type", sa.String(20), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("type", sa.String(20), nullable=False, server_default="text"),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("source", sa.Text(), nullable=True),
        sa.Column(
            "created_date", postgresql.TIMESTAMP(timezone=False), nullable=False
        ),
        sa.Column(
            "modification_date", postgresql.TIMESTAMP(timezone=False), nullable=False
        ),
    )
    op.create_index("idx_nodes_parent_id", "nodes", ["parent_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_nodes_parent_id", table_name="nodes")
    op.drop_table("nodes")

    op.drop_index("idx_ratings_post_id", table_name="ratings")
    op.drop_index("idx_ratings_user_post", table_name="ratings")
    op.drop_table("ratings")

    op.drop_index("idx_comments_post_id", table_name="comments")
    op.drop_index("idx_comments_user_id", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_posts_title", table_name="posts")
    op.drop_index("idx_posts_user_id", table_name="posts")
    op.drop_table("posts")
