"""Domain value objects for Folio."""

from folio.domain.value.identifiers import (
    CommentId,
    NodeId,
    PostId,
    RatingId,
    UserId,
)
from folio.domain.value.types import NodeType, ParentType, PostStatus, Role

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "RatingId",
    "NodeId",
    # Types
    "ParentType",
    "PostStatus",
    "NodeType",
    "Role",
]
