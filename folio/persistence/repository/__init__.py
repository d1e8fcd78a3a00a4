"""PostgreSQL repository implementations."""

from folio.persistence.repository.comment import PostgresCommentRepository
from folio.persistence.repository.node import PostgresNodeRepository
from folio.persistence.repository.post import PostgresPostRepository
from folio.persistence.repository.rating import PostgresRatingRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresRatingRepository",
    "PostgresNodeRepository",
]
