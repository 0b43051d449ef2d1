"""
Repository for asset sources
"""

from __future__ import annotations

from sqlalchemy import delete, exists, func, select, update

from threatmap.models.asset_source import AssetSource
from threatmap.repositories.base import BaseRepository


class AssetSourceRepository(BaseRepository[AssetSource]):
    model = AssetSource

    async def find_by_name(self, name: str) -> AssetSource | None:
        return await self._first(select(AssetSource).where(AssetSource.name == name))

    async def find_by_description_containing(self, description: str) -> list[AssetSource]:
        """Case-insensitive substring match on the description"""
        return await self._all(
            self._select().where(AssetSource.description.icontains(description, autoescape=True))
        )

    async def count_all(self) -> int:
        result = await self.session.execute(select(func.count(AssetSource.id)))
        return result.scalar_one()

    async def update_description_by_id(self, id: int, description: str | None) -> int:
        result = await self.session.execute(
            update(AssetSource)
            .where(AssetSource.id == id)
            .values(description=description)
        )
        return result.rowcount

    async def exists_by_name(self, name: str) -> bool:
        result = await self.session.execute(select(exists().where(AssetSource.name == name)))
        return bool(result.scalar())

    async def delete_by_name(self, name: str) -> int:
        """Delete the named source; assets pointing at it keep existing with no source"""
        result = await self.session.execute(
            delete(AssetSource)
            .where(AssetSource.name == name)
        )
        return result.rowcount
