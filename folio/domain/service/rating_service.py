"""Rating domain service."""

from datetime import datetime
from typing import Optional

import logfire

from folio.domain.error import AlreadyExistsError, InvalidArgumentError, NotFoundError
from folio.domain.model.identity import Identity
from folio.domain.model.post import Post
from folio.domain.model.rating import Rating
from folio.domain.repository import RatingRepository
from folio.domain.value import PostId, RatingId, UserId

from .base import Service
from .identifier import assign_id
from .ownership import OwnershipPolicy
from .pagination import Paginator, SortKeys
from .post_service import PostService

RATING_SORT_KEYS: SortKeys = {
    "id": lambda rating: rating.id,
    "published": lambda rating: rating.published,
}


class RatingService(Service):
    """Domain service for rating operations."""

    def __init__(
        self,
        rating_repository: RatingRepository,
        post_service: PostService,
        ownership_policy: OwnershipPolicy,
        paginator: Paginator,
    ) -> None:
        """Initialize rating service.

        Args:
            rating_repository: Rating repository
            post_service: Post domain service
            ownership_policy: Ownership policy for update/delete
            paginator: Sort/paginate engine
        """
        self.rating_repository = rating_repository
        self.post_service = post_service
        self.ownership_policy = ownership_policy
        self.paginator = paginator

    async def create(self, rating: Rating, identity: Identity) -> Rating:
        """Rate a post on behalf of the acting identity.

        A user keeps at most one rating per post: an earlier rating by the
        same user on the same post is deleted before the new one is saved.
        The two steps are not atomic.

        Args:
            rating: Candidate rating; an id shorter than 7 characters is
                replaced
            identity: Acting identity, recorded as the rater

        Returns:
            Created rating

        Raises:
            AlreadyExistsError: If a rating with the given id is stored
            NotFoundError: If the rated post does not exist
        """
        rating_id = RatingId(assign_id(rating.id))
        with logfire.span(
            "rating_service.create",
            rating_id=rating_id,
            post_id=rating.post_id,
            user_id=identity.user_id,
        ):
            if await self.rating_repository.exists_by_id(rating_id):
                logfire.warn("Rating already exists", rating_id=rating_id)
                raise AlreadyExistsError("Rating", rating_id)
            await self.post_service.ensure_exists(rating.post_id)

            previous = await self.rating_repository.find_by_user_id_and_post_id(
                identity.user_id, rating.post_id
            )
            if previous is not None:
                await self.rating_repository.delete_by_id(previous.id)
                logfire.info(
                    "Previous rating replaced",
                    rating_id=previous.id,
                    post_id=rating.post_id,
                    user_id=identity.user_id,
                )

            saved = await self.rating_repository.save(
                rating.model_copy(
                    update={
                        "id": rating_id,
                        "user_id": identity.user_id,
                        "published": datetime.now(),
                    }
                )
            )
            logfire.info("Rating created", rating_id=saved.id, post_id=saved.post_id)
            return saved

    async def update(self, rating: Rating, identity: Identity) -> Rating:
        """Point a stored rating at the candidate's post.

        The rater keeps at most one rating per post: another rating by the
        same rater on the target post is deleted first, as on create.

        Raises:
            InvalidArgumentError: If the candidate has no id
            NotFoundError: If no rating has that id, or the target post is
                missing
            AccessDeniedError: If the identity is neither rater nor admin
        """
        if rating.id is None:
            raise InvalidArgumentError("Rating id is required for update")

        with logfire.span(
            "rating_service.update", rating_id=rating.id, user_id=identity.user_id
        ):
            stored = await self._load(rating.id)
            self.ownership_policy.ensure_can_mutate(
                identity, "rating", stored.id, stored.user_id
            )
            await self.post_service.ensure_exists(rating.post_id)

            previous = await self.rating_repository.find_by_user_id_and_post_id(
                stored.user_id, rating.post_id
            )
            if previous is not None and previous.id != stored.id:
                await self.rating_repository.delete_by_id(previous.id)
                logfire.info(
                    "Previous rating replaced",
                    rating_id=previous.id,
                    post_id=rating.post_id,
                    user_id=stored.user_id,
                )

            saved = await self.rating_repository.save(
                stored.model_copy(update={"post_id": rating.post_id})
            )
            logfire.info("Rating updated", rating_id=saved.id, post_id=saved.post_id)
            return saved

    async def find_all(self) -> list[Rating]:
        """Get every rating in store order."""
        with logfire.span("rating_service.find_all"):
            return await self.rating_repository.find_all()

    async def list_page(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
        desc: Optional[bool] = None,
    ) -> list[Rating]:
        """Get one sorted page of ratings.

        Args:
            limit: Page size
            offset: Ratings to skip
            sort: One of id, published
            desc: Reverse the sort order

        Raises:
            InvalidArgumentError: If limit/offset is negative or sort unknown
        """
        with logfire.span(
            "rating_service.list_page",
            limit=limit,
            offset=offset,
            sort=sort,
            desc=desc,
        ):
            ratings = await self.rating_repository.find_all()
            return self.paginator.list_page(
                ratings, RATING_SORT_KEYS, limit, offset, sort, desc
            )

    async def find_by_id(self, rating_id: RatingId) -> Rating:
        """Get a rating.

        Raises:
            NotFoundError: If no rating has that id
        """
        with logfire.span("rating_service.find_by_id", rating_id=rating_id):
            return await self._load(rating_id)

    async def delete_by_id(self, rating_id: RatingId, identity: Identity) -> None:
        """Delete a rating.

        Raises:
            NotFoundError: If no rating has that id
            AccessDeniedError: If the identity is neither rater nor admin
        """
        with logfire.span(
            "rating_service.delete_by_id",
            rating_id=rating_id,
            user_id=identity.user_id,
        ):
            stored = await self._load(rating_id)
            self.ownership_policy.ensure_can_mutate(
                identity, "rating", stored.id, stored.user_id
            )
            await self.rating_repository.delete_by_id(rating_id)
            logfire.info("Rating deleted", rating_id=rating_id)

    async def delete_all(self) -> None:
        """Delete every rating.

        Administrative operation: no authorization check is made.
        """
        with logfire.span("rating_service.delete_all"):
            await self.rating_repository.delete_all()
            logfire.warn("All ratings deleted")

    async def count_ratings_for_post(self, post_id: PostId) -> int:
        """Count the ratings a post has received.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("rating_service.count_ratings_for_post", post_id=post_id):
            await self.post_service.ensure_exists(post_id)
            count = await self.rating_repository.count_by_post_id(post_id)
            logfire.info("Ratings counted", post_id=post_id, count=count)
            return count

    async def list_rated_posts_for_user(
        self,
        user_id: UserId,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[Post]:
        """Get one page of the posts a user has rated.

        Posts come in the order the user's ratings are stored; no sort key
        applies.

        Args:
            user_id: Rater's user ID
            limit: Page size
            offset: Posts to skip

        Returns:
            Rated posts with their node trees

        Raises:
            InvalidArgumentError: If limit or offset is negative
            NotFoundError: If the user has no ratings, or a post on the
                requested page has since been deleted
        """
        with logfire.span(
            "rating_service.list_rated_posts_for_user",
            user_id=user_id,
            limit=limit,
            offset=offset,
        ):
            ratings = await self.rating_repository.find_all_by_user_id(user_id)
            page = self.paginator.slice_page(ratings, limit, offset)
            if not ratings:
                logfire.warn("No ratings for user", user_id=user_id)
                raise NotFoundError("User", user_id)

            return [await self.post_service.find_by_id(r.post_id) for r in page]

    async def _load(self, rating_id: RatingId) -> Rating:
        rating = await self.rating_repository.find_by_id(rating_id)
        if rating is None:
            logfire.warn("Rating not found", rating_id=rating_id)
            raise NotFoundError("Rating", rating_id)
        return rating
