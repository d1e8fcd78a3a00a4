"""Shared in-memory repository behaviour."""

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Dict-backed store keyed by entity id.

    Insertion order is the store order. Replacing an entity keeps its
    original position.
    """

    def __init__(self) -> None:
        self._entities: dict[str, T] = {}

    async def exists_by_id(self, entity_id: str) -> bool:
        """Check whether an entity with the given id is stored."""
        return entity_id in self._entities

    async def find_by_id(self, entity_id: str) -> Optional[T]:
        """Find an entity by ID."""
        return self._entities.get(entity_id)

    async def find_all(self) -> List[T]:
        """Return every entity in insertion order."""
        return list(self._entities.values())

    async def save(self, entity: T) -> T:
        """Save or replace an entity."""
        self._entities[entity.id] = entity
        return entity

    async def delete_by_id(self, entity_id: str) -> None:
        """Delete an entity."""
        self._entities.pop(entity_id, None)

    async def delete_all(self) -> None:
        """Delete every entity."""
        self._entities.clear()

    def _filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [e for e in self._entities.values() if predicate(e)]
