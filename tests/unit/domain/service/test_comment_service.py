"""Unit tests for CommentService."""

import pytest

from folio.domain.error import (
    AccessDeniedError,
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
)
from folio.domain.model import Comment, Node
from folio.domain.repository import CommentRepository, NodeRepository, PostRepository
from folio.domain.service import CommentService
from folio.domain.value import CommentId, PostId, UserId
from tests.conftest import make_identity, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def owner():
    return make_identity("user-0001")


async def _seed_comment(unit_env, owner, **fields) -> Comment:
    post_repo = await unit_env.get(PostRepository)
    comment_service = await unit_env.get(CommentService)
    if not await post_repo.exists_by_id(PostId("post-0001")):
        await post_repo.save(make_post("post-0001"))
    return await comment_service.create(
        Comment(post_id=PostId("post-0001"), text="original", **fields), owner
    )


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_on_existing_post(self, unit_env, owner):
        # Act
        comment = await _seed_comment(
            unit_env, owner, nodes=[Node(content="quote")]
        )

        # Assert
        assert comment.user_id == "user-0001"
        assert comment.comment_id is None
        assert comment.created_date == comment.modification_date
        assert [n.content for n in comment.nodes] == ["quote"]

    @pytest.mark.asyncio
    async def test_create_on_missing_post_raises(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create(
                Comment(post_id=PostId("post-9999"), text="hi"), owner
            )

        assert exc_info.value.resource == "Post"
        assert await comment_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_create_with_existing_id_raises_and_keeps_owner(
        self, unit_env, owner
    ):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await _seed_comment(unit_env, owner)

        # Act & Assert
        with pytest.raises(AlreadyExistsError):
            await comment_service.create(
                Comment(id=comment.id, post_id=PostId("post-0001"), text="replaced"),
                make_identity("user-0002"),
            )

        stored = await comment_service.find_by_id(comment.id)
        assert stored.user_id == "user-0001"
        assert stored.text == "original"

    @pytest.mark.asyncio
    async def test_reply_to_existing_comment(self, unit_env, owner):
        parent = await _seed_comment(unit_env, owner)

        reply = await _seed_comment(unit_env, owner, comment_id=parent.id)

        assert reply.comment_id == parent.id

    @pytest.mark.asyncio
    async def test_reply_to_missing_comment_raises(self, unit_env, owner):
        with pytest.raises(NotFoundError) as exc_info:
            await _seed_comment(
                unit_env, owner, comment_id=CommentId("comment-9999")
            )

        assert exc_info.value.resource == "Comment"

    @pytest.mark.asyncio
    async def test_placeholder_parent_comment_is_dropped(self, unit_env, owner):
        comment = await _seed_comment(unit_env, owner, comment_id=CommentId("0"))

        assert comment.comment_id is None


class TestUpdate:
    """Tests for update method."""

    @pytest.mark.asyncio
    async def test_owner_can_update(self, unit_env, owner):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await _seed_comment(unit_env, owner)

        # Act
        result = await comment_service.update(
            Comment(id=comment.id, post_id=PostId("post-0001"), text="edited"),
            owner,
        )

        # Assert
        assert result.text == "edited"
        assert result.user_id == "user-0001"
        assert result.created_date == comment.created_date
        assert result.modification_date >= comment.modification_date

    @pytest.mark.asyncio
    async def test_admin_can_update(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)
        comment = await _seed_comment(unit_env, owner)

        result = await comment_service.update(
            Comment(id=comment.id, post_id=PostId("post-0001"), text="moderated"),
            make_identity("admin-0001", admin=True),
        )

        assert result.text == "moderated"
        assert result.user_id == "user-0001"

    @pytest.mark.asyncio
    async def test_non_owner_update_is_denied_before_any_write(self, unit_env, owner):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        node_repo = await unit_env.get(NodeRepository)
        comment = await _seed_comment(unit_env, owner)

        # Act & Assert
        with pytest.raises(AccessDeniedError):
            await comment_service.update(
                Comment(
                    id=comment.id,
                    post_id=PostId("post-0001"),
                    text="hijacked",
                    nodes=[Node(content="spam")],
                ),
                make_identity("user-0002"),
            )

        stored = await comment_service.find_by_id(comment.id)
        assert stored.text == "original"
        assert await node_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_update_attaches_new_nodes(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)
        comment = await _seed_comment(unit_env, owner, nodes=[Node(content="one")])

        result = await comment_service.update(
            Comment(
                id=comment.id,
                post_id=PostId("post-0001"),
                text="original",
                nodes=[Node(content="two")],
            ),
            owner,
        )

        assert [n.content for n in result.nodes] == ["one", "two"]

    @pytest.mark.asyncio
    async def test_update_without_id_raises(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(InvalidArgumentError):
            await comment_service.update(
                Comment(post_id=PostId("post-0001"), text="x"), owner
            )


class TestDelete:
    """Tests for delete methods."""

    @pytest.mark.asyncio
    async def test_owner_deletes_comment_and_nodes(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)
        node_repo = await unit_env.get(NodeRepository)
        comment = await _seed_comment(unit_env, owner, nodes=[Node()])

        await comment_service.delete_by_id(comment.id, owner)

        with pytest.raises(NotFoundError):
            await comment_service.find_by_id(comment.id)
        assert await node_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_non_owner_delete_is_denied(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)
        comment = await _seed_comment(unit_env, owner)

        with pytest.raises(AccessDeniedError):
            await comment_service.delete_by_id(comment.id, make_identity("user-0002"))

        assert (await comment_service.find_by_id(comment.id)).id == comment.id


class TestQueries:
    """Tests for listing methods."""

    @pytest.mark.asyncio
    async def test_list_page_sorts_by_text(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        for comment_id, text in [("c-000001", "b"), ("c-000002", "a")]:
            await comment_repo.save(
                Comment(
                    id=CommentId(comment_id),
                    post_id=PostId("post-0001"),
                    text=text,
                    user_id=UserId("user-0001"),
                )
            )

        page = await comment_service.list_page(10, 0, "text", False)

        assert [c.text for c in page] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_list_page_rejects_post_sort_keys(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(InvalidArgumentError):
            await comment_service.list_page(10, 0, "title", False)

    @pytest.mark.asyncio
    async def test_find_all_by_user_id(self, unit_env, owner):
        comment_service = await unit_env.get(CommentService)
        await _seed_comment(unit_env, owner)
        await _seed_comment(unit_env, make_identity("user-0002"))

        mine = await comment_service.find_all_by_user_id(UserId("user-0001"))

        assert [c.user_id for c in mine] == ["user-0001"]
