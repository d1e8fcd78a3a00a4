"""Rating repository interface."""

from abc import abstractmethod
from typing import List, Optional

from folio.domain.model.rating import Rating
from folio.domain.repository.base import EntityRepository
from folio.domain.value import PostId, RatingId, UserId


class RatingRepository(EntityRepository[Rating, RatingId]):
    """Repository for Rating entity."""

    @abstractmethod
    async def find_all_by_user_id(self, user_id: UserId) -> List[Rating]:
        """Find a user's ratings in insertion order.

        Args:
            user_id: The rater's user ID

        Returns:
            List of ratings by the user
        """
        pass

    @abstractmethod
    async def exists_by_user_id_and_post_id(
        self, user_id: UserId, post_id: PostId
    ) -> bool:
        """Check whether a user has rated a post.

        Args:
            user_id: The rater's user ID
            post_id: The rated post ID

        Returns:
            True if a rating exists for the pair
        """
        pass

    @abstractmethod
    async def find_by_user_id_and_post_id(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Rating]:
        """Find a user's rating on a post.

        Args:
            user_id: The rater's user ID
            post_id: The rated post ID

        Returns:
            The rating if found, None otherwise
        """
        pass

    @abstractmethod
    async def count_by_post_id(self, post_id: PostId) -> int:
        """Count ratings referencing a post.

        Args:
            post_id: The rated post ID

        Returns:
            Number of ratings
        """
        pass
