"""Thin orchestration over the repositories."""

from threatmap.services.asset_service import AssetService, AssetSourceService, IPAddressService
from threatmap.services.base import CrudService
from threatmap.services.source_plugin_service import SourcePluginService
from threatmap.services.threat_service import (
    AssetThreatMappingService,
    ThreatIntelligenceService,
    VulnerabilityService,
)

__all__ = [
    "CrudService",
    "AssetService",
    "AssetSourceService",
    "AssetThreatMappingService",
    "IPAddressService",
    "SourcePluginService",
    "ThreatIntelligenceService",
    "VulnerabilityService",
]
