"""pytest fixtures shared across all tests."""

from __future__ import annotations

import pytest_asyncio

from threatmap.core.database import create_engine_from_url, make_session_factory
from threatmap.models import Asset, AssetSource, Criticality, ThreatIntelligence
from threatmap.models.base import Base

# SQLite in-memory: no PostgreSQL required.
# Each test function gets its own fresh DB to avoid cross-test pollution.
TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """Create a fresh in-memory SQLite engine (foreign keys on) per test function."""
    eng = create_engine_from_url(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return make_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Yield an async session bound to the test engine."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def nmap(db_session):
    source = AssetSource(name="Nmap", description="Network Mapper active scan")
    db_session.add(source)
    await db_session.flush()
    return source


@pytest_asyncio.fixture
async def host1(db_session, nmap):
    asset = Asset(
        hostname="host1",
        fqdn="host1.corp.example",
        mac_address="00:1A:2B:3C:4D:5E",
        asset_type="Server",
        os_name="Ubuntu",
        os_version="22.04",
        criticality=Criticality.HIGH,
        source=nmap,
    )
    db_session.add(asset)
    await db_session.flush()
    return asset


@pytest_asyncio.fixture
async def cve_threat(db_session):
    threat = ThreatIntelligence(threat_type="CVE", value="CVE-2024-1", severity="high")
    db_session.add(threat)
    await db_session.flush()
    return threat
