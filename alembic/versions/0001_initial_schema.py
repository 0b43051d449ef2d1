"""Initial schema: asset inventory, threat intelligence and relevance mappings.

Revision ID: 0001
Revises:
Create Date: 2024-01-01 00:00:00.000000
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_SEVERITIES = "('critical', 'high', 'medium', 'low')"


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=True)


def upgrade() -> None:
    # ── asset_source ─────────────────────────────────────────────────────────
    op.create_table(
        "asset_source",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
    )

    # ── asset ────────────────────────────────────────────────────────────────
    op.create_table(
        "asset",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("hostname", sa.String(255), nullable=False, unique=True),
        sa.Column("fqdn", sa.String(255), nullable=True),
        sa.Column("mac_address", sa.String(17), nullable=True),
        sa.Column("asset_type", sa.String(50), nullable=True),
        sa.Column("os_name", sa.String(100), nullable=True),
        sa.Column("os_version", sa.String(50), nullable=True),
        sa.Column("criticality", sa.String(10), nullable=True),
        sa.Column(
            "source_id",
            sa.Integer(),
            sa.ForeignKey("asset_source.id", ondelete="SET NULL"),
            nullable=True,
        ),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint(
            "criticality IN ('high', 'medium', 'low')", name="asset_criticality_check"
        ),
    )

    # ── ip_address ───────────────────────────────────────────────────────────
    op.create_table(
        "ip_address",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "asset_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("asset.id", ondelete="CASCADE"),
            nullable=True,
        ),
        # IPv4 and IPv6
        sa.Column("ip_address", sa.String(39), nullable=False),
        _created_at(),
    )

    # ── threat_intelligence ──────────────────────────────────────────────────
    op.create_table(
        "threat_intelligence",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("threat_type", sa.String(50), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("severity", sa.String(10), nullable=True),
        sa.Column("first_seen", sa.DateTime(), nullable=True),
        sa.Column("last_seen", sa.DateTime(), nullable=True),
        _created_at(),
        sa.CheckConstraint(
            f"severity IN {_SEVERITIES}", name="threat_intelligence_severity_check"
        ),
    )

    # ── vulnerability ────────────────────────────────────────────────────────
    op.create_table(
        "vulnerability",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("cve_id", sa.String(20), nullable=True, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("severity", sa.String(10), nullable=True),
        sa.Column(
            "exploit_available", sa.Boolean(), server_default=sa.false(), nullable=True
        ),
        _created_at(),
        sa.CheckConstraint(f"severity IN {_SEVERITIES}", name="vulnerability_severity_check"),
    )

    # ── affected_product ─────────────────────────────────────────────────────
    op.create_table(
        "affected_product",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "vulnerability_id",
            sa.Integer(),
            sa.ForeignKey("vulnerability.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("product_name", sa.String(255), nullable=False),
        _created_at(),
    )

    # ── asset_threat_mapping ─────────────────────────────────────────────────
    op.create_table(
        "asset_threat_mapping",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "asset_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("asset.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column(
            "threat_id",
            sa.Integer(),
            sa.ForeignKey("threat_intelligence.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column(
            "relevance_score",
            sa.Numeric(5, 2),
            server_default=sa.text("0.0"),
            nullable=False,
        ),
        _created_at(),
    )

    # ── source_plugin ────────────────────────────────────────────────────────
    op.create_table(
        "source_plugin",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("plugin_name", sa.String(100), nullable=False),
        sa.Column("enabled", sa.Boolean(), server_default=sa.true(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
    )

    op.create_index("idx_asset_hostname", "asset", ["hostname"])
    op.create_index("idx_asset_source_id", "asset", ["source_id"])
    op.create_index("idx_threat_type", "threat_intelligence", ["threat_type"])
    op.create_index("idx_threat_value", "threat_intelligence", ["value"])
    op.create_index("idx_ip_address", "ip_address", ["ip_address"])


def downgrade() -> None:
    op.drop_index("idx_ip_address", table_name="ip_address")
    op.drop_index("idx_threat_value", table_name="threat_intelligence")
    op.drop_index("idx_threat_type", table_name="threat_intelligence")
    op.drop_index("idx_asset_source_id", table_name="asset")
    op.drop_index("idx_asset_hostname", table_name="asset")
    op.drop_table("source_plugin")
    op.drop_table("asset_threat_mapping")
    op.drop_table("affected_product")
    op.drop_table("vulnerability")
    op.drop_table("threat_intelligence")
    op.drop_table("ip_address")
    op.drop_table("asset")
    op.drop_table("asset_source")
