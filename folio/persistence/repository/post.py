"""PostgreSQL implementation of Post repository."""

from typing import List

from folio.domain.model import Post
from folio.domain.repository import PostRepository
from folio.domain.value import UserId
from folio.persistence.mappers import post_to_dict, row_to_post
from folio.persistence.repository.base import PostgresRepository
from folio.persistence.tables import posts_table


class PostgresPostRepository(PostgresRepository[Post], PostRepository):
    """PostgreSQL implementation of PostRepository."""

    table = posts_table
    to_row = staticmethod(post_to_dict)
    from_row = staticmethod(row_to_post)

    async def find_all_by_user_id(self, user_id: UserId) -> List[Post]:
        """Find posts owned by a user."""
        return await self._find_where(posts_table.c.user_id == user_id)

    async def find_all_by_title(self, title: str) -> List[Post]:
        """Find posts with an exact title."""
        return await self._find_where(posts_table.c.title == title)
