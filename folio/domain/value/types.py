"""Domain value types for Folio.

Value types are immutable and defined by their values, not identity.
"""

from enum import Enum


class ParentType(str, Enum):
    """Kind of entity that owns a content node."""

    POST = "post"
    COMMENT = "comment"
    NODE = "node"


class PostStatus(str, Enum):
    """Publication status of a post.

    Declaration order is the sort order used for status listings.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    PENDING = "pending"
    BANNED = "banned"
    DELETED = "deleted"


class NodeType(str, Enum):
    """Kind of content block carried by a node."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    CODE = "code"
    LIST = "list"
    POLL = "poll"


class Role(str, Enum):
    """Capability attached to an acting identity."""

    USER = "user"
    ADMIN = "admin"
