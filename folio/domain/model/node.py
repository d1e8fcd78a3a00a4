"""Content node entity.

Nodes are the text and media blocks that make up the body of a post or a
comment. A node belongs to exactly one parent (a post, a comment or another
node) and may own child nodes of its own, forming a tree.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import NodeId, NodeType, ParentType, UserId


class Node(DomainModel):
    """Content node entity.

    Parent links are stored by id plus a discriminator, never as embedded
    back-pointers. The persisted record keeps ``nodes`` empty; the field is
    only populated on the views returned by the node service.
    """

    id: Optional[NodeId] = None
    parent_id: Optional[str] = None
    parent_type: Optional[ParentType] = None
    user_id: Optional[UserId] = None
    type: NodeType = NodeType.TEXT
    content: str = ""
    source: Optional[str] = None
    nodes: list["Node"] = Field(default_factory=list)
    created_date: datetime = Field(default_factory=datetime.now)
    modification_date: datetime = Field(default_factory=datetime.now)
