"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Node trees are never
written inline: the ``nodes`` field is dropped on the way in and left empty
on the way out.
"""

from typing import Any, Dict

from folio.domain.model import Comment, Node, Post, Rating
from folio.domain.value import (
    CommentId,
    NodeId,
    NodeType,
    ParentType,
    PostId,
    PostStatus,
    RatingId,
    UserId,
)


def _user_id(value: Any) -> UserId | None:
    return UserId(value) if value is not None else None


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        source=row.get("source"),
        user_id=_user_id(row.get("user_id")),
        tags=list(row.get("tags") or []),
        status=PostStatus(row["status"]),
        published=row["published"],
        changed=row["changed"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump(exclude={"nodes"})
    data["status"] = post.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        text=row["text"],
        user_id=_user_id(row.get("user_id")),
        post_id=PostId(row["post_id"]),
        comment_id=CommentId(row["comment_id"]) if row.get("comment_id") else None,
        created_date=row["created_date"],
        modification_date=row["modification_date"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump(exclude={"nodes"})


def row_to_rating(row: Dict[str, Any]) -> Rating:
    """Convert database row to Rating domain model."""
    return Rating(
        id=RatingId(row["id"]),
        user_id=_user_id(row.get("user_id")),
        post_id=PostId(row["post_id"]),
        published=row["published"],
    )


def rating_to_dict(rating: Rating) -> Dict[str, Any]:
    """Convert Rating domain model to database dict."""
    return rating.model_dump()


def row_to_node(row: Dict[str, Any]) -> Node:
    """Convert database row to Node domain model (children not loaded)."""
    return Node(
        id=NodeId(row["id"]),
        parent_id=row["parent_id"],
        parent_type=ParentType(row["parent_type"]),
        user_id=_user_id(row.get("user_id")),
        type=NodeType(row["type"]),
        content=row["content"],
        source=row.get("source"),
        created_date=row["created_date"],
        modification_date=row["modification_date"],
    )


def node_to_dict(node: Node) -> Dict[str, Any]:
    """Convert Node domain model to database dict (children excluded)."""
    data = node.model_dump(exclude={"nodes"})
    data["parent_type"] = node.parent_type.value if node.parent_type else None
    data["type"] = node.type.value
    return data
