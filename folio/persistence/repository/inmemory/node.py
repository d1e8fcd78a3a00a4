"""In-memory node repository for testing."""

from folio.domain.model.node import Node
from folio.domain.repository.node import NodeRepository

from .base import InMemoryRepository


class InMemoryNodeRepository(InMemoryRepository[Node], NodeRepository):
    """In-memory implementation of NodeRepository for testing."""

    async def find_all_by_parent_id(self, parent_id: str) -> list[Node]:
        """Find the direct children of a parent in insertion order."""
        return self._filter(lambda n: n.parent_id == parent_id)
