"""PostgreSQL implementation of Comment repository."""

from typing import List

from folio.domain.model import Comment
from folio.domain.repository import CommentRepository
from folio.domain.value import UserId
from folio.persistence.mappers import comment_to_dict, row_to_comment
from folio.persistence.repository.base import PostgresRepository
from folio.persistence.tables import comments_table


class PostgresCommentRepository(PostgresRepository[Comment], CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    table = comments_table
    to_row = staticmethod(comment_to_dict)
    from_row = staticmethod(row_to_comment)

    async def find_all_by_user_id(self, user_id: UserId) -> List[Comment]:
        """Find comments owned by a user."""
        return await self._find_where(comments_table.c.user_id == user_id)
