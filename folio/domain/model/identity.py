"""Acting identity.

Identities are resolved upstream from credentials and handed to the domain
services on every mutating call. They are never persisted.
"""

from pydantic import Field

from folio.domain.value import Role, UserId
from folio.domain.value.common import ValueObject


class Identity(ValueObject):
    """The user performing an operation and the roles they hold."""

    user_id: UserId
    roles: frozenset[Role] = Field(default_factory=lambda: frozenset({Role.USER}))

    @property
    def is_admin(self) -> bool:
        """Whether the identity holds the elevated admin capability."""
        return Role.ADMIN in self.roles
