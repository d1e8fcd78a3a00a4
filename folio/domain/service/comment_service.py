"""Comment domain service."""

from datetime import datetime
from typing import Optional

import logfire

from folio.domain.error import AlreadyExistsError, InvalidArgumentError, NotFoundError
from folio.domain.model.comment import Comment
from folio.domain.model.identity import Identity
from folio.domain.repository import CommentRepository
from folio.domain.value import CommentId, ParentType, UserId

from .base import Service
from .identifier import assign_id, is_assigned
from .node_service import NodeService
from .ownership import OwnershipPolicy
from .pagination import Paginator, SortKeys
from .post_service import PostService

COMMENT_SORT_KEYS: SortKeys = {
    "id": lambda comment: comment.id,
    "text": lambda comment: comment.text,
    "userId": lambda comment: comment.user_id or "",
    "postId": lambda comment: comment.post_id,
    "createdDate": lambda comment: comment.created_date,
    "modificationDate": lambda comment: comment.modification_date,
}


def _reply_target(comment_id: Optional[CommentId]) -> Optional[CommentId]:
    """Drop placeholder parent-comment ids."""
    return comment_id if is_assigned(comment_id) else None


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        node_service: NodeService,
        ownership_policy: OwnershipPolicy,
        paginator: Paginator,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            node_service: Node composition service
            ownership_policy: Ownership policy for update/delete
            paginator: Sort/paginate engine
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.node_service = node_service
        self.ownership_policy = ownership_policy
        self.paginator = paginator

    async def create(self, comment: Comment, identity: Identity) -> Comment:
        """Create a comment on a post, or a reply to another comment.

        Args:
            comment: Candidate comment; an id shorter than 7 characters is
                replaced, a parent-comment id that short is dropped
            identity: Acting identity, recorded as the owner

        Returns:
            Created comment with attached nodes

        Raises:
            AlreadyExistsError: If a comment with the given id is stored
            NotFoundError: If the post, or the replied-to comment, is missing
        """
        comment_id = CommentId(assign_id(comment.id))
        reply_to = _reply_target(comment.comment_id)
        with logfire.span(
            "comment_service.create",
            comment_id=comment_id,
            post_id=comment.post_id,
            parent_id=reply_to,
            user_id=identity.user_id,
        ):
            if await self.comment_repository.exists_by_id(comment_id):
                logfire.warn("Comment already exists", comment_id=comment_id)
                raise AlreadyExistsError("Comment", comment_id)
            await self.post_service.ensure_exists(comment.post_id)
            if reply_to is not None and not await self.comment_repository.exists_by_id(
                reply_to
            ):
                logfire.warn(
                    "Parent comment not found",
                    parent_id=reply_to,
                    post_id=comment.post_id,
                )
                raise NotFoundError("Comment", reply_to)

            now = datetime.now()
            saved = await self.comment_repository.save(
                comment.model_copy(
                    update={
                        "id": comment_id,
                        "comment_id": reply_to,
                        "user_id": identity.user_id,
                        "nodes": [],
                        "created_date": now,
                        "modification_date": now,
                    }
                )
            )
            nodes = await self.node_service.attach(
                saved.id, ParentType.COMMENT, comment.nodes, identity.user_id
            )

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=saved.post_id,
                node_count=len(nodes),
            )
            return saved.model_copy(update={"nodes": nodes})

    async def update(self, comment: Comment, identity: Identity) -> Comment:
        """Update the text and reply target of a stored comment.

        The owner, post and creation date stay as stored. Nodes on the
        candidate are attached to the comment once the identity has been
        authorized.

        Args:
            comment: Candidate comment carrying the id of the stored one
            identity: Acting identity

        Returns:
            Updated comment with its full node tree

        Raises:
            InvalidArgumentError: If the candidate has no id
            NotFoundError: If no comment has that id
            AccessDeniedError: If the identity is neither owner nor admin
        """
        if comment.id is None:
            raise InvalidArgumentError("Comment id is required for update")

        with logfire.span(
            "comment_service.update",
            comment_id=comment.id,
            user_id=identity.user_id,
        ):
            stored = await self._load(comment.id)
            self.ownership_policy.ensure_can_mutate(
                identity, "comment", stored.id, stored.user_id
            )

            if comment.nodes:
                await self.node_service.attach(
                    stored.id, ParentType.COMMENT, comment.nodes, identity.user_id
                )

            saved = await self.comment_repository.save(
                stored.model_copy(
                    update={
                        "text": comment.text,
                        "comment_id": _reply_target(comment.comment_id),
                        "modification_date": datetime.now(),
                    }
                )
            )

            logfire.info("Comment updated", comment_id=saved.id)
            return await self._with_nodes(saved)

    async def find_all(self) -> list[Comment]:
        """Get every comment with its node tree, in store order."""
        with logfire.span("comment_service.find_all"):
            comments = await self.comment_repository.find_all()
            return [await self._with_nodes(comment) for comment in comments]

    async def list_page(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
        desc: Optional[bool] = None,
    ) -> list[Comment]:
        """Get one sorted page of comments.

        Args:
            limit: Page size
            offset: Comments to skip
            sort: One of id, text, userId, postId, createdDate,
                modificationDate
            desc: Reverse the sort order

        Returns:
            Requested page of comments

        Raises:
            InvalidArgumentError: If limit/offset is negative or sort unknown
        """
        with logfire.span(
            "comment_service.list_page",
            limit=limit,
            offset=offset,
            sort=sort,
            desc=desc,
        ):
            comments = await self.find_all()
            page = self.paginator.list_page(
                comments, COMMENT_SORT_KEYS, limit, offset, sort, desc
            )
            logfire.info("Comments listed", count=len(page), total=len(comments))
            return page

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment with its node tree.

        Raises:
            NotFoundError: If no comment has that id
        """
        with logfire.span("comment_service.find_by_id", comment_id=comment_id):
            return await self._with_nodes(await self._load(comment_id))

    async def find_all_by_user_id(
        self,
        user_id: UserId,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[Comment]:
        """Get one page of a user's comments in store order.

        Raises:
            InvalidArgumentError: If limit or offset is negative
        """
        with logfire.span(
            "comment_service.find_all_by_user_id",
            user_id=user_id,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_all_by_user_id(user_id)
            page = self.paginator.slice_page(comments, limit, offset)
            return [await self._with_nodes(comment) for comment in page]

    async def delete_by_id(self, comment_id: CommentId, identity: Identity) -> None:
        """Delete a comment and its node tree.

        Raises:
            NotFoundError: If no comment has that id
            AccessDeniedError: If the identity is neither owner nor admin
        """
        with logfire.span(
            "comment_service.delete_by_id",
            comment_id=comment_id,
            user_id=identity.user_id,
        ):
            stored = await self._load(comment_id)
            self.ownership_policy.ensure_can_mutate(
                identity, "comment", stored.id, stored.user_id
            )

            await self.node_service.detach(comment_id)
            await self.comment_repository.delete_by_id(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)

    async def delete_all(self) -> None:
        """Delete every comment and its nodes.

        Administrative operation: no authorization check is made.
        """
        with logfire.span("comment_service.delete_all"):
            for comment in await self.comment_repository.find_all():
                await self.node_service.detach(comment.id)
            await self.comment_repository.delete_all()
            logfire.warn("All comments deleted")

    async def _load(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)
        return comment

    async def _with_nodes(self, comment: Comment) -> Comment:
        return comment.model_copy(
            update={"nodes": await self.node_service.fetch_tree(comment.id)}
        )
