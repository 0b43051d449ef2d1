"""
Repository for assets
"""

from __future__ import annotations

from sqlalchemy import exists, select

from threatmap.models.asset import Asset
from threatmap.models.enums import Criticality
from threatmap.repositories.base import BaseRepository


class AssetRepository(BaseRepository[Asset]):
    model = Asset

    def _select(self):
        return select(Asset).order_by(Asset.hostname)

    async def find_by_hostname(self, hostname: str) -> Asset | None:
        return await self._first(select(Asset).where(Asset.hostname == hostname))

    async def exists_by_hostname(self, hostname: str) -> bool:
        result = await self.session.execute(select(exists().where(Asset.hostname == hostname)))
        return bool(result.scalar())

    async def find_by_source_id(self, source_id: int) -> list[Asset]:
        return await self._all(self._select().where(Asset.source_id == source_id))

    async def find_by_criticality(self, criticality: Criticality | str) -> list[Asset]:
        return await self._all(
            self._select().where(Asset.criticality == Criticality.from_value(criticality))
        )
