"""Tests for core/config.py."""

from threatmap.core.config import Settings


def test_default_settings():
    s = Settings()
    assert s.log_level == "INFO"
    assert s.database_url  # non-empty
    assert s.db_echo is False


def test_sync_db_url():
    s = Settings(database_url="postgresql+asyncpg://user:pw@localhost/db")
    assert "+asyncpg" not in s.sync_database_url
    assert "postgresql" in s.sync_database_url


def test_sync_db_url_sqlite():
    s = Settings(database_url="sqlite+aiosqlite:///./threatmap.db")
    assert s.sync_database_url == "sqlite:///./threatmap.db"
