"""Base repository interface shared by every entity kind."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID", bound=str)


class EntityRepository(ABC, Generic[T, ID]):
    """Key/value-with-query collection for one entity kind.

    The store gives no ordering guarantee beyond being stable for a given
    state, and no cascade between collections.
    """

    @abstractmethod
    async def exists_by_id(self, entity_id: ID) -> bool:
        """Check whether an entity with the given id is stored.

        Args:
            entity_id: The entity's unique identifier

        Returns:
            True if stored, False otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: ID) -> Optional[T]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Return every stored entity in store order."""
        pass

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Save an entity (create or replace).

        Args:
            entity: The entity to save; its id must be set

        Returns:
            The saved entity
        """
        pass

    @abstractmethod
    async def delete_by_id(self, entity_id: ID) -> None:
        """Delete an entity by ID (no-op when absent).

        Args:
            entity_id: The entity ID to delete
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every entity in the collection."""
        pass
