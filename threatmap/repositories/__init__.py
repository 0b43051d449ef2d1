"""
Repository pattern for data access operations

Repository organization:
- base.py: generic async CRUD repository
- one module per entity with its lookup and filter queries
"""

from threatmap.repositories.asset_repository import AssetRepository
from threatmap.repositories.asset_source_repository import AssetSourceRepository
from threatmap.repositories.asset_threat_mapping_repository import AssetThreatMappingRepository
from threatmap.repositories.base import BaseRepository
from threatmap.repositories.ip_address_repository import IPAddressRepository
from threatmap.repositories.source_plugin_repository import SourcePluginRepository
from threatmap.repositories.threat_intelligence_repository import ThreatIntelligenceRepository
from threatmap.repositories.vulnerability_repository import (
    AffectedProductRepository,
    VulnerabilityRepository,
)

__all__ = [
    "BaseRepository",
    "AffectedProductRepository",
    "AssetRepository",
    "AssetSourceRepository",
    "AssetThreatMappingRepository",
    "IPAddressRepository",
    "SourcePluginRepository",
    "ThreatIntelligenceRepository",
    "VulnerabilityRepository",
]
