"""Strongly typed identifiers for Folio domain entities.

Identifiers are opaque strings assigned by the identifier generator.
Using NewType keeps post, comment and node ids from being mixed up.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
RatingId = NewType("RatingId", str)
NodeId = NewType("NodeId", str)
