"""Asset model: a monitored host or device."""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import CheckConstraint, Enum, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from threatmap.models.base import (
    Base,
    TimestampMixin,
    coerce_enum,
    require_text,
    require_value,
)
from threatmap.models.enums import Criticality, check_in, enum_values


class Asset(TimestampMixin, Base):
    __tablename__ = "asset"
    __required__ = ("hostname", "asset_type", "criticality")
    __table_args__ = (
        CheckConstraint(check_in("criticality", Criticality), name="asset_criticality_check"),
        Index("idx_asset_hostname", "hostname"),
        Index("idx_asset_source_id", "source_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )

    hostname: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    fqdn: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mac_address: Mapped[str | None] = mapped_column(String(17), nullable=True)
    asset_type: Mapped[str] = mapped_column(String(50), nullable=True)

    # OS fingerprint
    os_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    os_version: Mapped[str | None] = mapped_column(String(50), nullable=True)

    criticality: Mapped[Criticality] = mapped_column(
        Enum(
            Criticality,
            native_enum=False,
            create_constraint=False,
            length=10,
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=True,
    )

    source_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("asset_source.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    source: Mapped[Optional["AssetSource"]] = relationship(  # noqa: F821
        "AssetSource", back_populates="assets", lazy="selectin"
    )
    ip_addresses: Mapped[list["IPAddress"]] = relationship(  # noqa: F821
        "IPAddress",
        back_populates="asset",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
    threat_mappings: Mapped[list["AssetThreatMapping"]] = relationship(  # noqa: F821
        "AssetThreatMapping",
        back_populates="asset",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @validates("hostname", "asset_type")
    def _validate_text(self, key: str, value: str | None) -> str:
        return require_text(self, key, value)

    @validates("criticality")
    def _validate_criticality(self, key: str, value: Criticality | str | None) -> Criticality:
        require_value(self, key, value)
        return coerce_enum(self, key, Criticality, value)

    def __repr__(self) -> str:
        return f"<Asset hostname={self.hostname!r} criticality={self.criticality}>"
