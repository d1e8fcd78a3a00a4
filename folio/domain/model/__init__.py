"""Domain model entities for Folio."""

from folio.domain.model.comment import Comment
from folio.domain.model.identity import Identity
from folio.domain.model.node import Node
from folio.domain.model.post import Post
from folio.domain.model.rating import Rating

__all__ = [
    "Post",
    "Comment",
    "Rating",
    "Node",
    "Identity",
]
