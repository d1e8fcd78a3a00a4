"""In-memory post repository for testing."""

from folio.domain.model.post import Post
from folio.domain.repository.post import PostRepository
from folio.domain.value import UserId

from .base import InMemoryRepository


class InMemoryPostRepository(InMemoryRepository[Post], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    async def find_all_by_user_id(self, user_id: UserId) -> list[Post]:
        """Find posts owned by a user."""
        return self._filter(lambda p: p.user_id == user_id)

    async def find_all_by_title(self, title: str) -> list[Post]:
        """Find posts with an exact title."""
        return self._filter(lambda p: p.title == title)
