"""Comment entity.

Comments are attached to a post and may reply to another comment. Like
posts, a comment body is a tree of content nodes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.model.node import Node
from folio.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is expressed through ``comment_id``, the id of the comment
    being replied to (None for a top-level comment).
    """

    id: Optional[CommentId] = None
    text: str = ""
    user_id: Optional[UserId] = None
    post_id: PostId
    comment_id: Optional[CommentId] = None
    nodes: list[Node] = Field(default_factory=list)
    created_date: datetime = Field(default_factory=datetime.now)
    modification_date: datetime = Field(default_factory=datetime.now)
