"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from folio.domain.model import Identity, Post
from folio.domain.value import PostId, Role, UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_identity(user_id: str = "user-0001", admin: bool = False) -> Identity:
    """Build an acting identity for tests."""
    roles = {Role.USER, Role.ADMIN} if admin else {Role.USER}
    return Identity(user_id=UserId(user_id), roles=frozenset(roles))


def make_post(
    post_id: str,
    title: str = "post",
    user_id: str = "user-0001",
    minutes_ago: int = 0,
    **fields,
) -> Post:
    """Build a stored-looking post with a fixed publication time."""
    when = datetime(2024, 1, 1, 12, 0, 0) - timedelta(minutes=minutes_ago)
    return Post(
        id=PostId(post_id),
        title=title,
        user_id=UserId(user_id),
        published=when,
        changed=when,
        **fields,
    )
