"""In-memory comment repository for testing."""

from folio.domain.model.comment import Comment
from folio.domain.repository.comment import CommentRepository
from folio.domain.value import UserId

from .base import InMemoryRepository


class InMemoryCommentRepository(InMemoryRepository[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    async def find_all_by_user_id(self, user_id: UserId) -> list[Comment]:
        """Find comments owned by a user."""
        return self._filter(lambda c: c.user_id == user_id)
