"""Rating entity.

A rating records that a user rated a post. Each user holds at most one
rating per post; rating again replaces the previous one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import PostId, RatingId, UserId


class Rating(DomainModel):
    """Rating entity."""

    id: Optional[RatingId] = None
    user_id: Optional[UserId] = None
    post_id: PostId
    published: datetime = Field(default_factory=datetime.now)
