"""Source plugin service."""

from __future__ import annotations

from threatmap.core.exceptions import NotFoundError
from threatmap.models.source_plugin import SourcePlugin
from threatmap.repositories.source_plugin_repository import SourcePluginRepository
from threatmap.services.base import CrudService


class SourcePluginService(CrudService[SourcePlugin, SourcePluginRepository]):
    repository_class = SourcePluginRepository

    async def enabled_plugins(self) -> list[SourcePlugin]:
        return await self.repository.find_enabled()

    async def get_by_name(self, plugin_name: str) -> SourcePlugin:
        plugin = await self.repository.find_by_plugin_name(plugin_name)
        if plugin is None:
            raise NotFoundError(self.entity_name, plugin_name)
        return plugin
