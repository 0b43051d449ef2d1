"""SQLAlchemy ORM models."""

from threatmap.models.affected_product import AffectedProduct
from threatmap.models.asset import Asset
from threatmap.models.asset_source import AssetSource
from threatmap.models.asset_threat_mapping import AssetThreatMapping
from threatmap.models.base import Base
from threatmap.models.enums import Criticality, Severity
from threatmap.models.ip_address import IPAddress
from threatmap.models.source_plugin import SourcePlugin
from threatmap.models.threat_intelligence import ThreatIntelligence
from threatmap.models.vulnerability import Vulnerability

__all__ = [
    "Base", "AffectedProduct", "Asset", "AssetSource", "AssetThreatMapping",
    "Criticality", "IPAddress", "Severity", "SourcePlugin",
    "ThreatIntelligence", "Vulnerability",
]
