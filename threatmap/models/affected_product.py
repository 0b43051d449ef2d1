"""AffectedProduct model: a product name listed against a vulnerability."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from threatmap.models.base import Base, CreatedAtMixin, require_text, require_value


class AffectedProduct(CreatedAtMixin, Base):
    __tablename__ = "affected_product"
    __required__ = ("vulnerability", "product_name")

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vulnerability_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vulnerability.id", ondelete="CASCADE"),
        nullable=True,
    )
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)

    vulnerability: Mapped["Vulnerability"] = relationship(  # noqa: F821
        "Vulnerability", back_populates="affected_products", lazy="selectin"
    )

    @validates("vulnerability")
    def _validate_vulnerability(self, key: str, value):
        return require_value(self, key, value)

    @validates("product_name")
    def _validate_product_name(self, key: str, value: str | None) -> str:
        return require_text(self, key, value)

    def __repr__(self) -> str:
        return f"<AffectedProduct {self.product_name!r} vulnerability={self.vulnerability_id}>"
