"""Unit tests for NodeService."""

import pytest

from folio.domain.model import Node
from folio.domain.repository import NodeRepository
from folio.domain.service import MIN_ID_LENGTH, NodeService
from folio.domain.value import NodeId, NodeType, ParentType, UserId
from folio.persistence.repository.inmemory import InMemoryNodeRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAttach:
    """Tests for attach method."""

    @pytest.mark.asyncio
    async def test_attach_links_nodes_to_parent_in_order(self, unit_env):
        # Arrange
        node_service = await unit_env.get(NodeService)
        nodes = [Node(content="first"), Node(content="second", type=NodeType.CODE)]

        # Act
        attached = await node_service.attach(
            "post-0001", ParentType.POST, nodes, UserId("user-0001")
        )

        # Assert
        assert [n.content for n in attached] == ["first", "second"]
        for node in attached:
            assert node.parent_id == "post-0001"
            assert node.parent_type == ParentType.POST
            assert node.user_id == "user-0001"
            assert len(node.id) >= MIN_ID_LENGTH

        children = await node_service.fetch_children("post-0001")
        assert [n.id for n in children] == [n.id for n in attached]

    @pytest.mark.asyncio
    async def test_attach_keeps_real_ids_and_replaces_placeholders(self, unit_env):
        node_service = await unit_env.get(NodeService)

        attached = await node_service.attach(
            "post-0001",
            ParentType.POST,
            [Node(id="node-000001"), Node(id="x")],
        )

        assert attached[0].id == "node-000001"
        assert attached[1].id != "x"

    @pytest.mark.asyncio
    async def test_attach_persists_nested_children_under_their_node(self, unit_env):
        # Arrange
        node_service = await unit_env.get(NodeService)
        node_repo = await unit_env.get(NodeRepository)
        tree = Node(
            content="list",
            type=NodeType.LIST,
            nodes=[Node(content="item 1"), Node(content="item 2")],
        )

        # Act
        [root] = await node_service.attach("comment-0001", ParentType.COMMENT, [tree])

        # Assert
        assert [n.content for n in root.nodes] == ["item 1", "item 2"]
        assert all(n.parent_type == ParentType.NODE for n in root.nodes)
        assert all(n.parent_id == root.id for n in root.nodes)

        # Stored records never embed children
        stored = await node_repo.find_by_id(root.id)
        assert stored.nodes == []

    @pytest.mark.asyncio
    async def test_attach_empty_batch_is_noop(self, unit_env):
        node_service = await unit_env.get(NodeService)

        assert await node_service.attach("post-0001", ParentType.POST, []) == []
        assert await node_service.fetch_children("post-0001") == []


class TestFetchTree:
    """Tests for fetch_tree method."""

    @pytest.mark.asyncio
    async def test_fetch_tree_rebuilds_nested_nodes(self, unit_env):
        node_service = await unit_env.get(NodeService)
        await node_service.attach(
            "post-0001",
            ParentType.POST,
            [Node(content="outer", nodes=[Node(content="inner")])],
        )

        tree = await node_service.fetch_tree("post-0001")

        assert [n.content for n in tree] == ["outer"]
        assert [n.content for n in tree[0].nodes] == ["inner"]

    @pytest.mark.asyncio
    async def test_fetch_children_ignores_other_parents(self, unit_env):
        node_service = await unit_env.get(NodeService)
        await node_service.attach("post-0001", ParentType.POST, [Node(content="a")])
        await node_service.attach("post-0002", ParentType.POST, [Node(content="b")])

        children = await node_service.fetch_children("post-0002")

        assert [n.content for n in children] == ["b"]


class TestDetach:
    """Tests for detach method."""

    @pytest.mark.asyncio
    async def test_detach_removes_whole_subtree(self, unit_env):
        # Arrange
        node_service = await unit_env.get(NodeService)
        node_repo = await unit_env.get(NodeRepository)
        await node_service.attach(
            "post-0001",
            ParentType.POST,
            [Node(nodes=[Node(), Node()]), Node()],
        )
        await node_service.attach("post-0002", ParentType.POST, [Node()])

        # Act
        deleted = await node_service.detach("post-0001")

        # Assert
        assert deleted == 4
        remaining = await node_repo.find_all()
        assert [n.parent_id for n in remaining] == ["post-0002"]


class _FailingNodeRepository(InMemoryNodeRepository):
    """Node repository whose save fails on the given call."""

    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.calls = 0

    async def save(self, entity: Node) -> Node:
        self.calls += 1
        if self.calls == self.fail_on:
            raise RuntimeError("store unavailable")
        return await super().save(entity)


class TestAttachFailures:
    """Tests for attach when the store fails or ids collide."""

    @pytest.mark.asyncio
    async def test_failure_midway_keeps_earlier_nodes(self):
        # Arrange
        node_repo = _FailingNodeRepository(fail_on=3)
        node_service = NodeService(node_repository=node_repo)
        nodes = [Node(content=f"block {i}") for i in range(1, 5)]

        # Act
        with pytest.raises(RuntimeError, match="store unavailable"):
            await node_service.attach("post-0001", ParentType.POST, nodes)

        # Assert
        remaining = await node_repo.find_all_by_parent_id("post-0001")
        assert [n.content for n in remaining] == ["block 1", "block 2"]

    @pytest.mark.asyncio
    async def test_id_of_another_parents_node_is_replaced(self, unit_env):
        # Arrange
        node_service = await unit_env.get(NodeService)
        node_repo = await unit_env.get(NodeRepository)
        shared_id = NodeId("node-000001")
        [theirs] = await node_service.attach(
            "post-0001", ParentType.POST, [Node(id=shared_id, content="a")]
        )

        # Act
        [mine] = await node_service.attach(
            "post-0002",
            ParentType.POST,
            [Node(id=shared_id, content="defaced")],
        )

        # Assert
        assert mine.id != theirs.id
        stored = await node_repo.find_by_id(theirs.id)
        assert stored.parent_id == "post-0001"
        assert stored.content == "a"
        children = await node_service.fetch_children("post-0002")
        assert [n.content for n in children] == ["defaced"]

    @pytest.mark.asyncio
    async def test_id_under_same_parent_is_resaved_in_place(self, unit_env):
        node_service = await unit_env.get(NodeService)
        node_id = NodeId("node-000001")
        await node_service.attach(
            "post-0001", ParentType.POST, [Node(id=node_id, content="a")]
        )

        [node] = await node_service.attach(
            "post-0001", ParentType.POST, [Node(id=node_id, content="b")]
        )

        assert node.id == "node-000001"
        children = await node_service.fetch_children("post-0001")
        assert [n.content for n in children] == ["b"]
