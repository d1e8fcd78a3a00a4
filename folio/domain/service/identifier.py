"""Entity identifier generation."""

from typing import Optional
from uuid import uuid4

# Ids shorter than this are placeholders sent by callers that want a new id
MIN_ID_LENGTH = 7


def new_id() -> str:
    """Generate a fresh, collision-free entity identifier."""
    return str(uuid4())


def is_assigned(identifier: Optional[str]) -> bool:
    """Whether a caller-supplied identifier should be kept as a real id.

    Args:
        identifier: Identifier from a candidate entity

    Returns:
        False when the identifier is missing or shorter than MIN_ID_LENGTH
    """
    return identifier is not None and len(identifier) >= MIN_ID_LENGTH


def assign_id(identifier: Optional[str]) -> str:
    """Keep a real identifier or replace a missing/placeholder one."""
    return identifier if is_assigned(identifier) else new_id()
