"""Required-field validation and value coercion on the ORM models."""

import math
import uuid
from decimal import Decimal

import pytest

from threatmap.core.exceptions import ValidationError
from threatmap.models import (
    AffectedProduct,
    Asset,
    AssetSource,
    AssetThreatMapping,
    Criticality,
    IPAddress,
    Severity,
    SourcePlugin,
    ThreatIntelligence,
    Vulnerability,
)


def make_asset(**overrides) -> Asset:
    fields = {"hostname": "web-01", "asset_type": "Server", "criticality": Criticality.MEDIUM}
    fields.update(overrides)
    return Asset(**fields)


def make_threat(**overrides) -> ThreatIntelligence:
    fields = {"threat_type": "IP", "value": "203.0.113.7", "severity": "medium"}
    fields.update(overrides)
    return ThreatIntelligence(**fields)


# ── Asset ────────────────────────────────────────────────────────────────────


def test_asset_valid_fields_are_kept():
    asset = make_asset(fqdn="web-01.example", os_name="Debian", os_version="12")
    assert asset.hostname == "web-01"
    assert asset.asset_type == "Server"
    assert asset.fqdn == "web-01.example"
    assert asset.os_version == "12"
    assert asset.criticality is Criticality.MEDIUM
    assert asset.source is None


@pytest.mark.parametrize("field", ["hostname", "asset_type", "criticality"])
def test_asset_missing_required_field(field):
    fields = {"hostname": "web-01", "asset_type": "Server", "criticality": "low"}
    del fields[field]
    with pytest.raises(ValidationError) as exc:
        Asset(**fields)
    assert exc.value.field == field
    assert exc.value.entity == "Asset"


@pytest.mark.parametrize("field", ["hostname", "asset_type"])
@pytest.mark.parametrize("blank", [None, "", "   "])
def test_asset_blank_text_rejected(field, blank):
    with pytest.raises(ValidationError):
        make_asset(**{field: blank})


def test_asset_setter_rejects_blank_and_keeps_old_value():
    asset = make_asset()
    with pytest.raises(ValidationError):
        asset.hostname = " "
    assert asset.hostname == "web-01"
    with pytest.raises(ValidationError):
        asset.criticality = None
    assert asset.criticality is Criticality.MEDIUM


def test_asset_criticality_parsed_case_insensitively():
    assert make_asset(criticality="HIGH").criticality is Criticality.HIGH
    assert make_asset(criticality="Low").criticality is Criticality.LOW


def test_asset_criticality_unknown_value():
    with pytest.raises(ValidationError):
        make_asset(criticality="urgent")


def test_asset_optional_fields_accept_none():
    asset = make_asset(fqdn=None, mac_address=None, os_name=None, source=None)
    asset.fqdn = None
    assert asset.fqdn is None


# ── AssetSource ──────────────────────────────────────────────────────────────


def test_asset_source_requires_name():
    with pytest.raises(ValidationError):
        AssetSource()
    with pytest.raises(ValidationError):
        AssetSource(name="")
    source = AssetSource(name="Nessus")
    with pytest.raises(ValidationError):
        source.name = "  "
    assert source.name == "Nessus"
    assert source.description is None


# ── IPAddress ────────────────────────────────────────────────────────────────


def test_ip_address_requires_asset_and_ip():
    asset = make_asset()
    with pytest.raises(ValidationError):
        IPAddress(ip="10.0.0.1")
    with pytest.raises(ValidationError):
        IPAddress(asset=None, ip="10.0.0.1")
    with pytest.raises(ValidationError):
        IPAddress(asset=asset, ip=" ")
    ip = IPAddress(asset=asset, ip="fe80::1")
    assert ip.asset is asset
    assert ip.ip == "fe80::1"
    with pytest.raises(ValidationError):
        ip.asset = None


def test_rejected_ip_address_is_not_attached_to_asset():
    asset = make_asset()
    with pytest.raises(ValidationError):
        IPAddress(asset=asset, ip="")
    assert asset.ip_addresses == []


# ── ThreatIntelligence ───────────────────────────────────────────────────────


@pytest.mark.parametrize("field", ["threat_type", "value", "severity"])
@pytest.mark.parametrize("blank", [None, "", "  "])
def test_threat_blank_required_field(field, blank):
    with pytest.raises(ValidationError):
        make_threat(**{field: blank})


def test_threat_severity_values():
    assert make_threat(severity="CRITICAL").severity is Severity.CRITICAL
    assert make_threat(severity=Severity.LOW).severity is Severity.LOW
    with pytest.raises(ValidationError):
        make_threat(severity="info")


def test_threat_optional_fields():
    threat = make_threat(description=None, first_seen=None, last_seen=None)
    assert threat.description is None
    threat.value = "198.51.100.1"
    assert threat.value == "198.51.100.1"


# ── Vulnerability / AffectedProduct ──────────────────────────────────────────


def test_vulnerability_fields_are_optional():
    vuln = Vulnerability()
    assert vuln.cve_id is None
    assert Vulnerability(cve_id="CVE-2024-3094", severity="Critical").severity is Severity.CRITICAL
    with pytest.raises(ValidationError):
        Vulnerability(severity="catastrophic")


def test_affected_product_requires_vulnerability_and_name():
    vuln = Vulnerability(cve_id="CVE-2024-3094")
    with pytest.raises(ValidationError):
        AffectedProduct(product_name="xz-utils")
    with pytest.raises(ValidationError):
        AffectedProduct(vulnerability=vuln, product_name="")
    product = AffectedProduct(vulnerability=vuln, product_name="xz-utils")
    assert product.vulnerability is vuln
    assert vuln.affected_products == [product]
    with pytest.raises(ValidationError):
        product.product_name = None


# ── AssetThreatMapping ───────────────────────────────────────────────────────


@pytest.mark.parametrize("missing", ["asset", "threat", "relevance_score"])
def test_mapping_requires_all_fields(missing):
    fields = {"asset": make_asset(), "threat": make_threat(), "relevance_score": 1.5}
    fields[missing] = None
    with pytest.raises(ValidationError) as exc:
        AssetThreatMapping(**fields)
    assert exc.value.field == missing


@pytest.mark.parametrize(
    "score, expected",
    [(7.25, Decimal("7.25")), ("5.5", Decimal("5.5")), (3, Decimal(3)), (Decimal("0.1"), Decimal("0.1"))],
)
def test_mapping_score_is_stored_as_given(score, expected):
    mapping = AssetThreatMapping(asset=make_asset(), threat=make_threat(), relevance_score=score)
    assert mapping.relevance_score == expected
    assert isinstance(mapping.relevance_score, Decimal)


@pytest.mark.parametrize("score", ["high", math.nan, math.inf, 1000, -1000.5, True])
def test_mapping_score_rejects_invalid_values(score):
    with pytest.raises(ValidationError):
        AssetThreatMapping(asset=make_asset(), threat=make_threat(), relevance_score=score)


def test_mapping_setters_reject_none():
    mapping = AssetThreatMapping(asset=make_asset(), threat=make_threat(), relevance_score=1)
    for field in ("asset", "threat", "relevance_score"):
        with pytest.raises(ValidationError):
            setattr(mapping, field, None)


# ── SourcePlugin ─────────────────────────────────────────────────────────────


def test_source_plugin_validation_and_enabled_default():
    with pytest.raises(ValidationError):
        SourcePlugin(plugin_name=" ")
    plugin = SourcePlugin(plugin_name="nmap-xml", enabled=None)
    assert plugin.enabled is True
    plugin.enabled = False
    assert plugin.enabled is False
    plugin.enabled = None
    assert plugin.enabled is True


# ── Identity & enums ─────────────────────────────────────────────────────────


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        AssetSource(name="")


def test_equality_by_primary_key():
    assert AssetSource(id=1, name="a") == AssetSource(id=1, name="b")
    assert AssetSource(id=1, name="a") != AssetSource(id=2, name="a")
    assert AssetSource(name="a") != AssetSource(name="a")
    assert SourcePlugin(id=1, plugin_name="a") != AssetSource(id=1, name="a")
    key = uuid.uuid4()
    first, second = make_asset(id=key), make_asset(id=key, hostname="other")
    assert first == second
    assert len({first, second}) == 1


def test_enum_from_value():
    assert Criticality.from_value(" medium ") is Criticality.MEDIUM
    assert str(Severity.HIGH) == "high"
    assert Severity.HIGH == "high"
    with pytest.raises(ValueError):
        Severity.from_value("none")


@pytest.mark.parametrize(
    "score, expected",
    [("7.255", Decimal("7.26")), (-7.255, Decimal("-7.26")), ("0.004", Decimal("0.00")), (5, Decimal("5.00"))],
)
def test_mapping_score_rounded_to_column_scale(score, expected):
    mapping = AssetThreatMapping(asset=make_asset(), threat=make_threat(), relevance_score=score)
    assert mapping.relevance_score == expected
    assert mapping.relevance_score.as_tuple().exponent == -2


def test_mapping_score_rounding_past_limit_rejected():
    with pytest.raises(ValidationError):
        AssetThreatMapping(asset=make_asset(), threat=make_threat(), relevance_score="999.995")
    assert AssetThreatMapping(
        asset=make_asset(), threat=make_threat(), relevance_score="999.994"
    ).relevance_score == Decimal("999.99")


def test_hash_is_stable_while_key_is_unset():
    source = AssetSource(name="X")
    bag = {source}
    source.id = 7
    assert source in bag
    assert hash(source) == hash(source)
