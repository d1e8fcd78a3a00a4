"""Comment repository interface."""

from abc import abstractmethod
from typing import List

from folio.domain.model.comment import Comment
from folio.domain.repository.base import EntityRepository
from folio.domain.value import CommentId, UserId


class CommentRepository(EntityRepository[Comment, CommentId]):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_all_by_user_id(self, user_id: UserId) -> List[Comment]:
        """Find comments owned by a user, in store order.

        Args:
            user_id: The owner's user ID

        Returns:
            List of comments owned by the user
        """
        pass
