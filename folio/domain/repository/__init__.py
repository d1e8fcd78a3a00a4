"""Repository interfaces for Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from folio.domain.repository.base import EntityRepository
from folio.domain.repository.comment import CommentRepository
from folio.domain.repository.node import NodeRepository
from folio.domain.repository.post import PostRepository
from folio.domain.repository.rating import RatingRepository

__all__ = [
    "EntityRepository",
    "PostRepository",
    "CommentRepository",
    "RatingRepository",
    "NodeRepository",
]
