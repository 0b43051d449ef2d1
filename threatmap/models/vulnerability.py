"""Vulnerability model: a CVE and the products it affects."""

from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Enum, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from threatmap.models.base import Base, CreatedAtMixin, coerce_enum
from threatmap.models.enums import Severity, check_in, enum_values


class Vulnerability(CreatedAtMixin, Base):
    __tablename__ = "vulnerability"
    __table_args__ = (
        CheckConstraint(check_in("severity", Severity), name="vulnerability_severity_check"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Official CVE identifier (e.g. "CVE-2024-12345")
    cve_id: Mapped[str | None] = mapped_column(String(20), unique=True, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    severity: Mapped[Severity | None] = mapped_column(
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

    exploit_available: Mapped[bool | None] = mapped_column(
        Boolean, default=False, server_default=false(), nullable=True
    )

    affected_products: Mapped[list["AffectedProduct"]] = relationship(  # noqa: F821
        "AffectedProduct",
        back_populates="vulnerability",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    @validates("severity")
    def _validate_severity(self, key: str, value: Severity | str | None) -> Severity | None:
        return coerce_enum(self, key, Severity, value)

    def __repr__(self) -> str:
        return f"<Vulnerability {self.cve_id!r} severity={self.severity}>"
