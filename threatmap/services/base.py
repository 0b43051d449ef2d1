"""Generic service wrapper over a repository."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from threatmap.core.exceptions import NotFoundError
from threatmap.core.logging import get_logger
from threatmap.models.base import Base
from threatmap.repositories.base import BaseRepository

T = TypeVar("T", bound=Base)
R = TypeVar("R", bound=BaseRepository)

logger = get_logger(__name__)


class CrudService(Generic[T, R]):
    """create / get / list / update / delete for one entity type.

    Subclasses set ``repository_class``; the repository is built on the
    session handed to the service.
    """

    repository_class: ClassVar[type[BaseRepository]]

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository: R = self.repository_class(session)  # type: ignore[assignment]

    @property
    def entity_name(self) -> str:
        return self.repository.model.__name__

    async def create(self, entity: T) -> T:
        saved = await self.repository.save(entity)
        logger.info("Created entity", entity=self.entity_name, id=str(self.repository._key(saved)))
        return saved

    async def get_by_id(self, id: Any) -> T:
        entity = await self.repository.get_by_id(id)
        if entity is None:
            logger.warning("Entity not found", entity=self.entity_name, id=str(id))
            raise NotFoundError(self.entity_name, id)
        return entity

    async def get_all(self) -> list[T]:
        return await self.repository.get_all()

    async def update(self, id: Any, payload: T) -> T:
        """Apply the state set on ``payload`` to the stored row ``id``.

        Columns and many-to-one links assigned on ``payload`` are copied onto
        the persistent instance, which is returned; its primary key and any
        unset attribute are left alone. ``payload`` is discarded, including
        the entries its backrefs added to parent collections.
        """
        existing = await self.get_by_id(id)
        reload: list[tuple[Base, str]] = []
        if payload is not existing:
            parents = self._copy_state(payload, existing)
            for parent, key in parents:
                if key in inspect(parent).dict:
                    reload.append((parent, key))
                self.session.expire(parent, [key])
        saved = await self.repository.save(existing)
        for parent, key in reload:
            await self.session.refresh(parent, [key])
        logger.info("Updated entity", entity=self.entity_name, id=str(id))
        return saved

    def _copy_state(self, payload: T, existing: T) -> list[tuple[Base, str]]:
        """Copy assigned attributes; return persistent (parent, collection) pairs payload joined."""
        state = inspect(payload)
        mapper = state.mapper
        keys = {mapper.get_property_by_column(column).key for column in mapper.primary_key}
        for prop in mapper.column_attrs:
            if prop.key in state.dict and prop.key not in keys:
                setattr(existing, prop.key, state.dict[prop.key])

        parents = []
        for prop in mapper.relationships:
            if prop.uselist or prop.key not in state.dict:
                continue
            parent = state.dict[prop.key]
            setattr(existing, prop.key, parent)
            if (
                parent is not None
                and prop.back_populates
                and parent in self.session
                and inspect(parent).persistent
            ):
                parents.append((parent, prop.back_populates))
        return parents

    async def delete(self, id: Any) -> None:
        """Remove the row ``id``; a missing row is not an error."""
        deleted = await self.repository.delete_by_id(id)
        logger.info("Deleted entity", entity=self.entity_name, id=str(id), found=deleted)
