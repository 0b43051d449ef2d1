"""AssetThreatMapping junction: correlates an asset with a threat.

``relevance_score`` is computed outside this package and supplied when the
mapping is built; it is stored and queried as-is.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from threatmap.models.base import Base, CreatedAtMixin, coerce_decimal, require_value

SCORE_PRECISION = 5
SCORE_SCALE = 2


class AssetThreatMapping(CreatedAtMixin, Base):
    __tablename__ = "asset_threat_mapping"
    __required__ = ("asset", "threat", "relevance_score")

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    asset_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("asset.id", ondelete="CASCADE"),
        nullable=True,
    )
    threat_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("threat_intelligence.id", ondelete="CASCADE"),
        nullable=True,
    )

    relevance_score: Mapped[Decimal] = mapped_column(
        Numeric(SCORE_PRECISION, SCORE_SCALE, asdecimal=True),
        nullable=False,
        default=Decimal("0.0"),
        server_default=text("0.0"),
    )

    # Relationships
    asset: Mapped["Asset"] = relationship(  # noqa: F821
        "Asset", back_populates="threat_mappings", lazy="selectin"
    )
    threat: Mapped["ThreatIntelligence"] = relationship(  # noqa: F821
        "ThreatIntelligence", back_populates="asset_mappings", lazy="selectin"
    )

    @validates("asset", "threat")
    def _validate_link(self, key: str, value):
        return require_value(self, key, value)

    @validates("relevance_score")
    def _validate_score(self, key: str, value) -> Decimal:
        return coerce_decimal(self, key, value, SCORE_PRECISION, SCORE_SCALE)

    def __repr__(self) -> str:
        return (
            f"<AssetThreatMapping asset={self.asset_id} threat={self.threat_id}"
            f" score={self.relevance_score}>"
        )
