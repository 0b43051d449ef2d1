"""IPAddress model: one address (v4 or v6) bound to an asset."""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from threatmap.models.base import Base, CreatedAtMixin, require_text, require_value


class IPAddress(CreatedAtMixin, Base):
    __tablename__ = "ip_address"
    __required__ = ("asset", "ip")
    __table_args__ = (Index("idx_ip_address", "ip_address"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("asset.id", ondelete="CASCADE"),
        nullable=True,
    )

    # Column is named ip_address; 39 chars fits a full IPv6 address
    ip: Mapped[str] = mapped_column("ip_address", String(39), nullable=False)

    asset: Mapped["Asset"] = relationship(  # noqa: F821
        "Asset", back_populates="ip_addresses", lazy="selectin"
    )

    @validates("asset")
    def _validate_asset(self, key: str, value):
        return require_value(self, key, value)

    @validates("ip")
    def _validate_ip(self, key: str, value: str | None) -> str:
        return require_text(self, key, value)

    def __repr__(self) -> str:
        return f"<IPAddress {self.ip!r} asset={self.asset_id}>"
