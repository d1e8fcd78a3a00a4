"""Post aggregate root.

Posts are the primary content type in Folio. The body of a post is a tree
of content nodes which are persisted separately and reattached on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.model.node import Node
from folio.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Post aggregate root.

    A post arriving from a caller is a candidate: its id may be missing and
    its title may be empty. The post service validates both before anything
    is persisted.
    """

    id: Optional[PostId] = None
    title: str = ""
    source: Optional[str] = None
    user_id: Optional[UserId] = None
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.DRAFT
    nodes: list[Node] = Field(default_factory=list)
    published: datetime = Field(default_factory=datetime.now)
    changed: datetime = Field(default_factory=datetime.now)
