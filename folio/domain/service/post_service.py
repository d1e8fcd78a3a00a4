"""Post domain service."""

from datetime import datetime
from typing import Optional

import logfire

from folio.domain.error import (
    AlreadyExistsError,
    InvalidArgumentError,
    InvalidFieldError,
    NotFoundError,
)
from folio.domain.model.identity import Identity
from folio.domain.model.post import Post
from folio.domain.repository import PostRepository
from folio.domain.value import ParentType, PostId, PostStatus, UserId

from .base import Service
from .identifier import assign_id
from .node_service import NodeService
from .ownership import OwnershipPolicy
from .pagination import Paginator, SortKeys

_STATUS_ORDER = {status: index for index, status in enumerate(PostStatus)}

POST_SORT_KEYS: SortKeys = {
    "id": lambda post: post.id,
    "title": lambda post: post.title,
    "source": lambda post: post.source or "",
    "published": lambda post: post.published,
    "changed": lambda post: post.changed,
    "status": lambda post: _STATUS_ORDER[post.status],
    "userId": lambda post: post.user_id or "",
}


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        node_service: NodeService,
        ownership_policy: OwnershipPolicy,
        paginator: Paginator,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            node_service: Node composition service
            ownership_policy: Ownership policy for update/delete
            paginator: Sort/paginate engine
        """
        self.post_repository = post_repository
        self.node_service = node_service
        self.ownership_policy = ownership_policy
        self.paginator = paginator

    async def create(self, post: Post, identity: Identity) -> Post:
        """Create a post together with its node tree.

        Args:
            post: Candidate post; an id shorter than 7 characters is replaced
            identity: Acting identity, recorded as the owner

        Returns:
            Created post with attached nodes

        Raises:
            AlreadyExistsError: If a post with the given id is stored
            InvalidFieldError: If the title is empty
        """
        post_id = PostId(assign_id(post.id))
        with logfire.span(
            "post_service.create", post_id=post_id, user_id=identity.user_id
        ):
            if await self.post_repository.exists_by_id(post_id):
                logfire.warn("Post already exists", post_id=post_id)
                raise AlreadyExistsError("Post", post_id)
            if not post.title:
                logfire.warn("Post title is empty", post_id=post_id)
                raise InvalidFieldError("title", "must not be empty")

            now = datetime.now()
            saved = await self.post_repository.save(
                post.model_copy(
                    update={
                        "id": post_id,
                        "user_id": identity.user_id,
                        "nodes": [],
                        "published": now,
                        "changed": now,
                    }
                )
            )
            nodes = await self.node_service.attach(
                saved.id, ParentType.POST, post.nodes, identity.user_id
            )

            logfire.info("Post created", post_id=saved.id, node_count=len(nodes))
            return saved.model_copy(update={"nodes": nodes})

    async def update(self, post: Post, identity: Identity) -> Post:
        """Replace the mutable fields of a stored post.

        Title, source, tags and status come from the candidate; the owner
        and publication date stay as stored. Nodes on the candidate are
        attached to the post.

        Args:
            post: Candidate post carrying the id of the stored one
            identity: Acting identity

        Returns:
            Updated post with its full node tree

        Raises:
            InvalidArgumentError: If the candidate has no id
            NotFoundError: If no post has that id
            AccessDeniedError: If the identity is neither owner nor admin
        """
        if post.id is None:
            raise InvalidArgumentError("Post id is required for update")

        with logfire.span(
            "post_service.update", post_id=post.id, user_id=identity.user_id
        ):
            stored = await self._load(post.id)
            self.ownership_policy.ensure_can_mutate(
                identity, "post", stored.id, stored.user_id
            )

            if post.nodes:
                await self.node_service.attach(
                    stored.id, ParentType.POST, post.nodes, identity.user_id
                )

            saved = await self.post_repository.save(
                stored.model_copy(
                    update={
                        "title": post.title,
                        "source": post.source,
                        "tags": post.tags,
                        "status": post.status,
                        "changed": datetime.now(),
                    }
                )
            )

            logfire.info("Post updated", post_id=saved.id)
            return await self._with_nodes(saved)

    async def find_all(self) -> list[Post]:
        """Get every post with its node tree, in store order."""
        with logfire.span("post_service.find_all"):
            posts = await self.post_repository.find_all()
            return [await self._with_nodes(post) for post in posts]

    async def list_page(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
        desc: Optional[bool] = None,
    ) -> list[Post]:
        """Get one sorted page of posts.

        Args:
            limit: Page size
            offset: Posts to skip
            sort: One of id, title, source, published, changed, status, userId
            desc: Reverse the sort order

        Returns:
            Requested page of posts

        Raises:
            InvalidArgumentError: If limit/offset is negative or sort unknown
        """
        with logfire.span(
            "post_service.list_page", limit=limit, offset=offset, sort=sort, desc=desc
        ):
            posts = await self.find_all()
            page = self.paginator.list_page(
                posts, POST_SORT_KEYS, limit, offset, sort, desc
            )
            logfire.info("Posts listed", count=len(page), total=len(posts))
            return page

    async def find_by_id(self, post_id: PostId) -> Post:
        """Get a post with its node tree.

        Raises:
            NotFoundError: If no post has that id
        """
        with logfire.span("post_service.find_by_id", post_id=post_id):
            return await self._with_nodes(await self._load(post_id))

    async def find_all_by_user_id(
        self,
        user_id: UserId,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[Post]:
        """Get one page of a user's posts in store order.

        Raises:
            InvalidArgumentError: If limit or offset is negative
        """
        with logfire.span(
            "post_service.find_all_by_user_id",
            user_id=user_id,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_all_by_user_id(user_id)
            page = self.paginator.slice_page(posts, limit, offset)
            return [await self._with_nodes(post) for post in page]

    async def find_all_by_title(self, title: str) -> list[Post]:
        """Get posts with exactly this title."""
        with logfire.span("post_service.find_all_by_title", title=title):
            posts = await self.post_repository.find_all_by_title(title)
            return [await self._with_nodes(post) for post in posts]

    async def ensure_exists(self, post_id: PostId) -> None:
        """Raise NotFoundError unless a post with this id is stored."""
        if not await self.post_repository.exists_by_id(post_id):
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", post_id)

    async def delete_by_id(self, post_id: PostId, identity: Identity) -> None:
        """Delete a post and its node tree.

        Raises:
            NotFoundError: If no post has that id
            AccessDeniedError: If the identity is neither owner nor admin
        """
        with logfire.span(
            "post_service.delete_by_id", post_id=post_id, user_id=identity.user_id
        ):
            stored = await self._load(post_id)
            self.ownership_policy.ensure_can_mutate(
                identity, "post", stored.id, stored.user_id
            )

            await self.node_service.detach(post_id)
            await self.post_repository.delete_by_id(post_id)
            logfire.info("Post deleted", post_id=post_id)

    async def delete_all(self) -> None:
        """Delete every post and its nodes.

        Administrative operation: no authorization check is made.
        """
        with logfire.span("post_service.delete_all"):
            for post in await self.post_repository.find_all():
                await self.node_service.detach(post.id)
            await self.post_repository.delete_all()
            logfire.warn("All posts deleted")

    async def _load(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", post_id)
        return post

    async def _with_nodes(self, post: Post) -> Post:
        return post.model_copy(
            update={"nodes": await self.node_service.fetch_tree(post.id)}
        )
