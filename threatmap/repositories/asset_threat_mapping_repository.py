"""
Repository for asset-to-threat relevance mappings
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from threatmap.models.asset_threat_mapping import AssetThreatMapping
from threatmap.models.base import to_decimal
from threatmap.repositories.base import BaseRepository


class AssetThreatMappingRepository(BaseRepository[AssetThreatMapping]):
    model = AssetThreatMapping

    async def find_by_asset_id(self, asset_id: uuid.UUID) -> list[AssetThreatMapping]:
        return await self._all(self._select().where(AssetThreatMapping.asset_id == asset_id))

    async def find_by_threat_id(self, threat_id: int) -> list[AssetThreatMapping]:
        return await self._all(self._select().where(AssetThreatMapping.threat_id == threat_id))

    async def find_by_relevance_score_greater_than(
        self, threshold: Decimal | float | int | str
    ) -> list[AssetThreatMapping]:
        """Mappings scoring strictly above ``threshold``, highest first"""
        threshold = to_decimal(AssetThreatMapping, "relevance_score", threshold)
        return await self._all(
            self._select()
            .where(AssetThreatMapping.relevance_score > threshold)
            .order_by(None)
            .order_by(AssetThreatMapping.relevance_score.desc(), AssetThreatMapping.id)
        )
