"""
Repository for threat intelligence records
"""

from __future__ import annotations

from threatmap.models.enums import Severity
from threatmap.models.threat_intelligence import ThreatIntelligence
from threatmap.repositories.base import BaseRepository


class ThreatIntelligenceRepository(BaseRepository[ThreatIntelligence]):
    model = ThreatIntelligence

    async def find_by_severity(self, severity: Severity | str) -> list[ThreatIntelligence]:
        return await self._all(
            self._select().where(ThreatIntelligence.severity == Severity.from_value(severity))
        )

    async def find_by_threat_type(self, threat_type: str) -> list[ThreatIntelligence]:
        return await self._all(self._select().where(ThreatIntelligence.threat_type == threat_type))

    async def search_by_value(self, value: str) -> list[ThreatIntelligence]:
        """Case-insensitive substring match on the threat value"""
        return await self._all(
            self._select().where(ThreatIntelligence.value.icontains(value, autoescape=True))
        )
