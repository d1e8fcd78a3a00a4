"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .node import InMemoryNodeRepository
from .post import InMemoryPostRepository
from .rating import InMemoryRatingRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryNodeRepository",
    "InMemoryPostRepository",
    "InMemoryRatingRepository",
]
