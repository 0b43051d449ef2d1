"""
Repository for asset IP addresses
"""

from __future__ import annotations

import uuid

from sqlalchemy import select

from threatmap.models.ip_address import IPAddress
from threatmap.repositories.base import BaseRepository


class IPAddressRepository(BaseRepository[IPAddress]):
    model = IPAddress

    async def find_by_asset_id(self, asset_id: uuid.UUID) -> list[IPAddress]:
        return await self._all(self._select().where(IPAddress.asset_id == asset_id))

    async def find_by_ip(self, ip: str) -> IPAddress | None:
        return await self._first(
            select(IPAddress).where(IPAddress.ip == ip).order_by(IPAddress.id)
        )
