"""Ownership policy for mutating operations."""

from typing import Optional

import logfire

from folio.domain.error import AccessDeniedError
from folio.domain.model.identity import Identity

from .base import Service


class OwnershipPolicy(Service):
    """Decides whether an identity may update or delete a resource.

    The owner of a resource and any admin may mutate it; nobody else can.
    """

    def can_mutate(self, identity: Identity, owner_user_id: Optional[str]) -> bool:
        """Check mutation rights.

        Args:
            identity: Acting identity
            owner_user_id: User ID recorded as the resource's owner

        Returns:
            True if the identity owns the resource or is an admin
        """
        return identity.user_id == owner_user_id or identity.is_admin

    def ensure_can_mutate(
        self,
        identity: Identity,
        resource: str,
        resource_id: str,
        owner_user_id: Optional[str],
    ) -> None:
        """Raise unless the identity may mutate the resource.

        Args:
            identity: Acting identity
            resource: Resource kind, for error context
            resource_id: Resource ID, for error context
            owner_user_id: User ID recorded as the resource's owner

        Raises:
            AccessDeniedError: If the identity is neither owner nor admin
        """
        if not self.can_mutate(identity, owner_user_id):
            logfire.warn(
                "Mutation denied",
                resource=resource,
                resource_id=resource_id,
                user_id=identity.user_id,
                owner_user_id=owner_user_id,
            )
            raise AccessDeniedError(resource, resource_id, identity.user_id)
