"""Node composition domain service."""

from typing import Optional, Sequence

import logfire

from folio.domain.model.node import Node
from folio.domain.repository import NodeRepository
from folio.domain.value import NodeId, ParentType, UserId

from .base import Service
from .identifier import assign_id, new_id


class NodeService(Service):
    """Attaches content node trees to their parents and reads them back.

    Nodes are stored flat, one record per node, linked to their parent by
    id. A post or comment view gets its ``nodes`` field rebuilt from the
    store on every read.
    """

    def __init__(self, node_repository: NodeRepository) -> None:
        """Initialize node service.

        Args:
            node_repository: Node repository
        """
        self.node_repository = node_repository

    async def attach(
        self,
        parent_id: str,
        parent_type: ParentType,
        nodes: Sequence[Node],
        user_id: Optional[UserId] = None,
    ) -> list[Node]:
        """Persist nodes (and their subtrees) under a parent.

        Nodes are saved one by one in input order. A failure partway through
        is not rolled back: nodes saved before it stay in the store.
        A supplied id that names a node under another parent is replaced,
        so attaching never moves an existing node.

        Args:
            parent_id: ID of the owning post, comment or node
            parent_type: Kind of the owner
            nodes: Nodes to attach, possibly carrying child nodes
            user_id: Owner recorded on every attached node

        Returns:
            The attached nodes with ids, parent links and subtrees populated
        """
        with logfire.span(
            "node_service.attach",
            parent_id=parent_id,
            parent_type=parent_type.value,
            count=len(nodes),
        ):
            attached = []
            for node in nodes:
                record = node.model_copy(
                    update={
                        "id": await self._claim_id(node.id, parent_id),
                        "parent_id": parent_id,
                        "parent_type": parent_type,
                        "user_id": user_id or node.user_id,
                        "nodes": [],
                    }
                )
                saved = await self.node_repository.save(record)

                children = []
                if node.nodes:
                    children = await self.attach(
                        saved.id, ParentType.NODE, node.nodes, user_id
                    )
                attached.append(saved.model_copy(update={"nodes": children}))

            logfire.info("Nodes attached", parent_id=parent_id, count=len(attached))
            return attached

    async def fetch_children(self, parent_id: str) -> list[Node]:
        """Return the direct children of a parent in store order.

        Args:
            parent_id: ID of a post, comment or node

        Returns:
            Child nodes, without their own subtrees
        """
        return await self.node_repository.find_all_by_parent_id(parent_id)

    async def fetch_tree(self, parent_id: str) -> list[Node]:
        """Return the full node tree below a parent.

        Args:
            parent_id: ID of a post, comment or node

        Returns:
            Child nodes with their ``nodes`` populated recursively
        """
        children = await self.fetch_children(parent_id)
        return [
            child.model_copy(update={"nodes": await self.fetch_tree(child.id)})
            for child in children
        ]

    async def detach(self, parent_id: str) -> int:
        """Delete every node below a parent, deepest first.

        The store does not cascade deletes, so this must run before the
        parent itself is removed.

        Args:
            parent_id: ID of a post, comment or node

        Returns:
            Number of nodes deleted
        """
        with logfire.span("node_service.detach", parent_id=parent_id):
            deleted = 0
            for child in await self.fetch_children(parent_id):
                deleted += await self.detach(child.id)
                await self.node_repository.delete_by_id(child.id)
                deleted += 1

            if deleted:
                logfire.info("Nodes detached", parent_id=parent_id, count=deleted)
            return deleted

    async def _claim_id(self, node_id: Optional[str], parent_id: str) -> NodeId:
        """Keep a supplied id only if it is new or already under this parent.

        A node never moves between parents: an id naming another parent's
        node is replaced with a fresh one.
        """
        claimed = assign_id(node_id)
        existing = await self.node_repository.find_by_id(claimed)
        if existing is not None and existing.parent_id != parent_id:
            logfire.warn(
                "Node id belongs to another parent",
                node_id=claimed,
                parent_id=parent_id,
                owner_parent_id=existing.parent_id,
            )
            claimed = new_id()
        return NodeId(claimed)
