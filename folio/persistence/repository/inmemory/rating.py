"""In-memory rating repository for testing."""

from typing import Optional

from folio.domain.model.rating import Rating
from folio.domain.repository.rating import RatingRepository
from folio.domain.value import PostId, UserId

from .base import InMemoryRepository


class InMemoryRatingRepository(InMemoryRepository[Rating], RatingRepository):
    """In-memory implementation of RatingRepository for testing."""

    async def find_all_by_user_id(self, user_id: UserId) -> list[Rating]:
        """Find a user's ratings in insertion order."""
        return self._filter(lambda r: r.user_id == user_id)

    async def exists_by_user_id_and_post_id(
        self, user_id: UserId, post_id: PostId
    ) -> bool:
        """Check whether a user has rated a post."""
        return await self.find_by_user_id_and_post_id(user_id, post_id) is not None

    async def find_by_user_id_and_post_id(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Rating]:
        """Find a user's rating on a post."""
        matches = self._filter(
            lambda r: r.user_id == user_id and r.post_id == post_id
        )
        return matches[0] if matches else None

    async def count_by_post_id(self, post_id: PostId) -> int:
        """Count ratings for a post."""
        return len(self._filter(lambda r: r.post_id == post_id))
