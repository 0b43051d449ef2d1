"""ThreatIntelligence model: an indicator of compromise or threat value."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Enum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from threatmap.models.base import (
    Base,
    CreatedAtMixin,
    coerce_enum,
    require_text,
)
from threatmap.models.enums import Severity, check_in, enum_values


class ThreatIntelligence(CreatedAtMixin, Base):
    __tablename__ = "threat_intelligence"
    __required__ = ("threat_type", "value", "severity")
    __table_args__ = (
        CheckConstraint(check_in("severity", Severity), name="threat_intelligence_severity_check"),
        Index("idx_threat_type", "threat_type"),
        Index("idx_threat_value", "value"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # e.g. "Malware", "CVE", "IP", "Domain"
    threat_type: Mapped[str] = mapped_column(String(50), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    severity: Mapped[Severity] = mapped_column(
        Enum(
            Severity,
            native_enum=False,
            create_constraint=False,
            length=10,
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=True,
    )

    first_seen: Mapped[datetime | None] = mapped_column(DateTime(), nullable=True)
    last_seen: Mapped[datetime | None] = mapped_column(DateTime(), nullable=True)

    asset_mappings: Mapped[list["AssetThreatMapping"]] = relationship(  # noqa: F821
        "AssetThreatMapping",
        back_populates="threat",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @validates("threat_type", "value")
    def _validate_text(self, key: str, value: str | None) -> str:
        return require_text(self, key, value)

    @validates("severity")
    def _validate_severity(self, key: str, value: Severity | str | None) -> Severity:
        require_text(self, key, value)
        return coerce_enum(self, key, Severity, value)

    def __repr__(self) -> str:
        return (
            f"<ThreatIntelligence id={self.id} type={self.threat_type!r}"
            f" value={self.value!r} severity={self.severity}>"
        )
