"""Domain services."""

from .base import Service
from .comment_service import COMMENT_SORT_KEYS, CommentService
from .identifier import MIN_ID_LENGTH, assign_id, is_assigned, new_id
from .node_service import NodeService
from .ownership import OwnershipPolicy
from .pagination import Paginator, SortKeys
from .post_service import POST_SORT_KEYS, PostService
from .rating_service import RATING_SORT_KEYS, RatingService

__all__ = [
    "COMMENT_SORT_KEYS",
    "CommentService",
    "MIN_ID_LENGTH",
    "NodeService",
    "OwnershipPolicy",
    "POST_SORT_KEYS",
    "Paginator",
    "PostService",
    "RATING_SORT_KEYS",
    "RatingService",
    "Service",
    "SortKeys",
    "assign_id",
    "is_assigned",
    "new_id",
]
