"""PostgreSQL implementation of Node repository."""

from typing import List

from folio.domain.model import Node
from folio.domain.repository import NodeRepository
from folio.persistence.mappers import node_to_dict, row_to_node
from folio.persistence.repository.base import PostgresRepository
from folio.persistence.tables import nodes_table


class PostgresNodeRepository(PostgresRepository[Node], NodeRepository):
    """PostgreSQL implementation of NodeRepository."""

    table = nodes_table
    to_row = staticmethod(node_to_dict)
    from_row = staticmethod(row_to_node)

    async def find_all_by_parent_id(self, parent_id: str) -> List[Node]:
        """Find the direct children of a parent, oldest first."""
        stmt = (
            self.table.select()
            .where(nodes_table.c.parent_id == parent_id)
            .order_by(nodes_table.c.created_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_node(row._asdict()) for row in result.fetchall()]
