"""
Repository for vulnerabilities and their affected products
"""

from __future__ import annotations

from sqlalchemy import delete, exists, select

from threatmap.models.affected_product import AffectedProduct
from threatmap.models.enums import Severity
from threatmap.models.vulnerability import Vulnerability
from threatmap.repositories.base import BaseRepository


class VulnerabilityRepository(BaseRepository[Vulnerability]):
    model = Vulnerability

    async def find_by_cve_id(self, cve_id: str) -> Vulnerability | None:
        return await self._first(select(Vulnerability).where(Vulnerability.cve_id == cve_id))

    async def find_by_severity(self, severity: Severity | str) -> list[Vulnerability]:
        return await self._all(
            self._select().where(Vulnerability.severity == Severity.from_value(severity))
        )

    async def find_exploitable(self) -> list[Vulnerability]:
        return await self._all(self._select().where(Vulnerability.exploit_available.is_(True)))


class AffectedProductRepository(BaseRepository[AffectedProduct]):
    model = AffectedProduct

    async def find_by_vulnerability_id(self, vulnerability_id: int) -> list[AffectedProduct]:
        return await self._all(
            self._select().where(AffectedProduct.vulnerability_id == vulnerability_id)
        )

    async def exists_by_vulnerability_id_and_product_name(
        self, vulnerability_id: int, product_name: str
    ) -> bool:
        result = await self.session.execute(
            select(
                exists().where(
                    AffectedProduct.vulnerability_id == vulnerability_id,
                    AffectedProduct.product_name == product_name,
                )
            )
        )
        return bool(result.scalar())

    async def delete_by_vulnerability_id(self, vulnerability_id: int) -> int:
        result = await self.session.execute(
            delete(AffectedProduct)
            .where(AffectedProduct.vulnerability_id == vulnerability_id)
        )
        return result.rowcount
