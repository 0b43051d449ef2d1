"""AssetSource model: the tool or feed an asset record was imported from."""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from threatmap.models.base import Base, CreatedAtMixin, require_text


class AssetSource(CreatedAtMixin, Base):
    __tablename__ = "asset_source"
    __required__ = ("name",)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ON DELETE SET NULL on asset.source_id; the ORM nulls loaded assets itself
    assets: Mapped[list["Asset"]] = relationship(  # noqa: F821
        "Asset", back_populates="source", passive_deletes=True
    )

    @validates("name")
    def _validate_name(self, key: str, value: str | None) -> str:
        return require_text(self, key, value)

    def __repr__(self) -> str:
        return f"<AssetSource id={self.id} name={self.name!r}>"
