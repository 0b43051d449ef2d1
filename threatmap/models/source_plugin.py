"""SourcePlugin model: a registered importer of asset or threat data."""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column, validates

from threatmap.models.base import Base, CreatedAtMixin, require_text


class SourcePlugin(CreatedAtMixin, Base):
    __tablename__ = "source_plugin"
    __required__ = ("plugin_name",)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plugin_name: Mapped[str] = mapped_column(String(100), nullable=False)
    enabled: Mapped[bool] = mapped_column(
        Boolean, default=True, server_default=true(), nullable=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    @validates("plugin_name")
    def _validate_plugin_name(self, key: str, value: str | None) -> str:
        return require_text(self, key, value)

    @validates("enabled")
    def _validate_enabled(self, key: str, value: bool | None) -> bool:
        # None means "use the default"
        return True if value is None else bool(value)

    def __repr__(self) -> str:
        return f"<SourcePlugin {self.plugin_name!r} enabled={self.enabled}>"
