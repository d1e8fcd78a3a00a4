"""Shared PostgreSQL repository behaviour."""

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from sqlalchemy import Table, delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class PostgresRepository(Generic[T]):
    """Key/value access to one table keyed by a string ``id`` column.

    Subclasses supply the table and the row mappers.
    """

    table: Table
    to_row: Callable[[T], Dict[str, Any]]
    from_row: Callable[[Dict[str, Any]], T]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists_by_id(self, entity_id: str) -> bool:
        """Check whether a row with the given id exists."""
        stmt = select(exists().where(self.table.c.id == entity_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_by_id(self, entity_id: str) -> Optional[T]:
        """Find a row by ID."""
        stmt = select(self.table).where(self.table.c.id == entity_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self.from_row(row._asdict()) if row else None

    async def find_all(self) -> List[T]:
        """Return every row."""
        return await self._find_where()

    async def save(self, entity: T) -> T:
        """Insert or replace a row."""
        values = self.to_row(entity)
        if await self.exists_by_id(values["id"]):
            stmt = (
                self.table.update()
                .where(self.table.c.id == values["id"])
                .values(**values)
            )
        else:
            stmt = self.table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return entity

    async def delete_by_id(self, entity_id: str) -> None:
        """Delete a row by ID."""
        stmt = delete(self.table).where(self.table.c.id == entity_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_all(self) -> None:
        """Delete every row."""
        await self.session.execute(delete(self.table))
        await self.session.flush()

    async def _find_where(self, *criteria: Any) -> List[T]:
        stmt = select(self.table).where(*criteria)
        result = await self.session.execute(stmt)
        return [self.from_row(row._asdict()) for row in result.fetchall()]
