"""Post repository interface."""

from abc import abstractmethod
from typing import List

from folio.domain.model.post import Post
from folio.domain.repository.base import EntityRepository
from folio.domain.value import PostId, UserId


class PostRepository(EntityRepository[Post, PostId]):
    """Repository for Post aggregate.

    Stored posts never carry nodes inline; those live in the node collection.
    """

    @abstractmethod
    async def find_all_by_user_id(self, user_id: UserId) -> List[Post]:
        """Find posts owned by a user, in store order.

        Args:
            user_id: The owner's user ID

        Returns:
            List of posts owned by the user
        """
        pass

    @abstractmethod
    async def find_all_by_title(self, title: str) -> List[Post]:
        """Find posts whose title matches exactly.

        Args:
            title: Title to match

        Returns:
            List of matching posts
        """
        pass
