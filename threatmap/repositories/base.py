"""
Base repository pattern implementation
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Sequence, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from threatmap.core.logging import get_logger
from threatmap.models.base import Base

T = TypeVar("T", bound=Base)

logger = get_logger(__name__)


class BaseRepository(Generic[T]):
    """Common CRUD operations over one mapped class.

    Every call runs in the caller's session and flushes writes immediately,
    so constraint violations surface at the call site. Committing is left to
    the caller (see ``threatmap.core.database.session_scope``).
    """

    model: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self) -> Select:
        return select(self.model).order_by(*inspect(self.model).primary_key)

    async def _all(self, stmt: Select) -> list[T]:
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _first(self, stmt: Select) -> T | None:
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def get_by_id(self, id: Any) -> T | None:
        """Get entity by primary key"""
        return await self.session.get(self.model, id)

    async def get_all(self) -> list[T]:
        return await self._all(self._select())

    async def exists_by_id(self, id: Any) -> bool:
        return await self.get_by_id(id) is not None

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def save(self, entity: T) -> T:
        """Insert or update ``entity`` and return the persistent instance.

        New and already-attached instances are added to the session. Detached
        instances, and transient ones carrying an existing primary key, are
        merged onto the stored row.
        """
        state = inspect(entity)
        if state.detached or (state.transient and self._has_key(entity)):
            entity = await self.session.merge(entity)
        else:
            self.session.add(entity)
        await self.session.flush()
        logger.debug("Saved entity", entity=self.model.__name__, id=str(self._key(entity)))
        return entity

    async def save_all(self, entities: Sequence[T]) -> list[T]:
        return [await self.save(entity) for entity in entities]

    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)
        await self.session.flush()
        logger.debug("Deleted entity", entity=self.model.__name__, id=str(self._key(entity)))

    async def delete_by_id(self, id: Any) -> bool:
        """Delete entity by primary key; returns False when no row matched"""
        entity = await self.get_by_id(id)
        if entity is None:
            return False
        await self.delete(entity)
        return True

    def _key(self, entity: T) -> Any:
        values = inspect(self.model).primary_key_from_instance(entity)
        return values[0] if len(values) == 1 else tuple(values)

    def _has_key(self, entity: T) -> bool:
        return all(value is not None for value in inspect(self.model).primary_key_from_instance(entity))
