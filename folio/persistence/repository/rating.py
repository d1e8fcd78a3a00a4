"""PostgreSQL implementation of Rating repository."""

from typing import List, Optional

from sqlalchemy import and_, exists, func, select

from folio.domain.model import Rating
from folio.domain.repository import RatingRepository
from folio.domain.value import PostId, UserId
from folio.persistence.mappers import rating_to_dict, row_to_rating
from folio.persistence.repository.base import PostgresRepository
from folio.persistence.tables import ratings_table


class PostgresRatingRepository(PostgresRepository[Rating], RatingRepository):
    """PostgreSQL implementation of RatingRepository."""

    table = ratings_table
    to_row = staticmethod(rating_to_dict)
    from_row = staticmethod(row_to_rating)

    async def find_all_by_user_id(self, user_id: UserId) -> List[Rating]:
        """Find a user's ratings, oldest first."""
        stmt = (
            select(ratings_table)
            .where(ratings_table.c.user_id == user_id)
            .order_by(ratings_table.c.published)
        )
        result = await self.session.execute(stmt)
        return [row_to_rating(row._asdict()) for row in result.fetchall()]

    async def exists_by_user_id_and_post_id(
        self, user_id: UserId, post_id: PostId
    ) -> bool:
        """Check whether a user has rated a post."""
        stmt = select(exists().where(self._pair(user_id, post_id)))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_by_user_id_and_post_id(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Rating]:
        """Find a user's rating on a post."""
        stmt = select(ratings_table).where(self._pair(user_id, post_id))
        result = await self.session.execute(stmt)
        row = result.first()
        return row_to_rating(row._asdict()) if row else None

    async def count_by_post_id(self, post_id: PostId) -> int:
        """Count ratings for a post."""
        stmt = (
            select(func.count())
            .select_from(ratings_table)
            .where(ratings_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def _pair(user_id: UserId, post_id: PostId):
        return and_(
            ratings_table.c.user_id == user_id,
            ratings_table.c.post_id == post_id,
        )
