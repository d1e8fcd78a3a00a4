"""Node repository interface."""

from abc import abstractmethod
from typing import List

from folio.domain.model.node import Node
from folio.domain.repository.base import EntityRepository
from folio.domain.value import NodeId


class NodeRepository(EntityRepository[Node, NodeId]):
    """Repository for content nodes, keyed by id with parent links by id."""

    @abstractmethod
    async def find_all_by_parent_id(self, parent_id: str) -> List[Node]:
        """Find the direct children of a parent (post, comment or node).

        Args:
            parent_id: The parent's ID

        Returns:
            List of child nodes in store order
        """
        pass
