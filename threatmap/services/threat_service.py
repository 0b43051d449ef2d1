"""Threat intelligence, vulnerability and relevance mapping services."""

from __future__ import annotations

import uuid
from decimal import Decimal

from threatmap.core.exceptions import NotFoundError
from threatmap.models.affected_product import AffectedProduct
from threatmap.models.asset import Asset
from threatmap.models.asset_threat_mapping import AssetThreatMapping
from threatmap.models.enums import Severity
from threatmap.models.threat_intelligence import ThreatIntelligence
from threatmap.models.vulnerability import Vulnerability
from threatmap.repositories.asset_threat_mapping_repository import AssetThreatMappingRepository
from threatmap.repositories.threat_intelligence_repository import ThreatIntelligenceRepository
from threatmap.repositories.vulnerability_repository import (
    AffectedProductRepository,
    VulnerabilityRepository,
)
from threatmap.services.base import CrudService


class ThreatIntelligenceService(CrudService[ThreatIntelligence, ThreatIntelligenceRepository]):
    repository_class = ThreatIntelligenceRepository

    async def by_severity(self, severity: Severity | str) -> list[ThreatIntelligence]:
        return await self.repository.find_by_severity(severity)

    async def by_type(self, threat_type: str) -> list[ThreatIntelligence]:
        return await self.repository.find_by_threat_type(threat_type)

    async def search(self, value: str) -> list[ThreatIntelligence]:
        return await self.repository.search_by_value(value)


class VulnerabilityService(CrudService[Vulnerability, VulnerabilityRepository]):
    repository_class = VulnerabilityRepository

    def __init__(self, session):
        super().__init__(session)
        self.products = AffectedProductRepository(session)

    async def get_by_cve_id(self, cve_id: str) -> Vulnerability:
        vulnerability = await self.repository.find_by_cve_id(cve_id)
        if vulnerability is None:
            raise NotFoundError(self.entity_name, cve_id)
        return vulnerability

    async def add_affected_product(
        self, vulnerability: Vulnerability, product_name: str
    ) -> AffectedProduct:
        return await self.products.save(
            AffectedProduct(vulnerability=vulnerability, product_name=product_name)
        )

    async def affected_products(self, vulnerability_id: int) -> list[AffectedProduct]:
        return await self.products.find_by_vulnerability_id(vulnerability_id)


class AssetThreatMappingService(CrudService[AssetThreatMapping, AssetThreatMappingRepository]):
    repository_class = AssetThreatMappingRepository

    async def map_threat(
        self,
        asset: Asset,
        threat: ThreatIntelligence,
        relevance_score: Decimal | float | int | str,
    ) -> AssetThreatMapping:
        """Record that ``threat`` is relevant to ``asset`` with a precomputed score."""
        return await self.create(
            AssetThreatMapping(asset=asset, threat=threat, relevance_score=relevance_score)
        )

    async def for_asset(self, asset_id: uuid.UUID) -> list[AssetThreatMapping]:
        return await self.repository.find_by_asset_id(asset_id)

    async def for_threat(self, threat_id: int) -> list[AssetThreatMapping]:
        return await self.repository.find_by_threat_id(threat_id)

    async def above_threshold(
        self, threshold: Decimal | float | int | str
    ) -> list[AssetThreatMapping]:
        return await self.repository.find_by_relevance_score_greater_than(threshold)
