"""Asset, asset source and IP address services."""

from __future__ import annotations

import uuid

from threatmap.core.exceptions import NotFoundError
from threatmap.models.asset import Asset
from threatmap.models.asset_source import AssetSource
from threatmap.models.enums import Criticality
from threatmap.models.ip_address import IPAddress
from threatmap.repositories.asset_repository import AssetRepository
from threatmap.repositories.asset_source_repository import AssetSourceRepository
from threatmap.repositories.ip_address_repository import IPAddressRepository
from threatmap.services.base import CrudService


class AssetSourceService(CrudService[AssetSource, AssetSourceRepository]):
    repository_class = AssetSourceRepository

    async def get_by_name(self, name: str) -> AssetSource:
        source = await self.repository.find_by_name(name)
        if source is None:
            raise NotFoundError(self.entity_name, name)
        return source

    async def search_description(self, text: str) -> list[AssetSource]:
        return await self.repository.find_by_description_containing(text)


class AssetService(CrudService[Asset, AssetRepository]):
    repository_class = AssetRepository

    async def get_by_hostname(self, hostname: str) -> Asset:
        asset = await self.repository.find_by_hostname(hostname)
        if asset is None:
            raise NotFoundError(self.entity_name, hostname)
        return asset

    async def by_criticality(self, criticality: Criticality | str) -> list[Asset]:
        return await self.repository.find_by_criticality(criticality)

    async def by_source(self, source_id: int) -> list[Asset]:
        return await self.repository.find_by_source_id(source_id)


class IPAddressService(CrudService[IPAddress, IPAddressRepository]):
    repository_class = IPAddressRepository

    async def add_address(self, asset: Asset, ip: str) -> IPAddress:
        return await self.create(IPAddress(asset=asset, ip=ip))

    async def for_asset(self, asset_id: uuid.UUID) -> list[IPAddress]:
        return await self.repository.find_by_asset_id(asset_id)

    async def get_by_ip(self, ip: str) -> IPAddress:
        address = await self.repository.find_by_ip(ip)
        if address is None:
            raise NotFoundError(self.entity_name, ip)
        return address
