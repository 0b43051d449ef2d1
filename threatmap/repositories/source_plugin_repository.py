"""
Repository for source plugins
"""

from __future__ import annotations

from sqlalchemy import select

from threatmap.models.source_plugin import SourcePlugin
from threatmap.repositories.base import BaseRepository


class SourcePluginRepository(BaseRepository[SourcePlugin]):
    model = SourcePlugin

    async def find_enabled(self) -> list[SourcePlugin]:
        return await self._all(self._select().where(SourcePlugin.enabled.is_(True)))

    async def find_by_plugin_name(self, plugin_name: str) -> SourcePlugin | None:
        return await self._first(
            select(SourcePlugin)
            .where(SourcePlugin.plugin_name == plugin_name)
            .order_by(SourcePlugin.id)
        )
