"""initial_schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

_ADDRESS_TABLES = ("ipv4_addresses", "ipv6_addresses")


def upgrade() -> None:
    op.create_table(
        "vlans",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("number", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.Text(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.CheckConstraint(
            "number IS NULL OR (number BETWEEN 1 AND 4094)", name="ck_vlans_number"
        ),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "vlan_interfaces",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "vlan_id",
            sa.Integer(),
            sa.ForeignKey("vlans.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.Text(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.UniqueConstraint("vlan_id", "name", name="uq_vlan_interfaces_vlan_name"),
    )
    for table_name in _ADDRESS_TABLES:
        op.create_table(
            table_name,
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column(
                "vlan_id",
                sa.Integer(),
                sa.ForeignKey("vlans.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("address", sa.Text(), nullable=False),
            sa.Column("address_key", sa.Text(), nullable=False),
            sa.Column(
                "vlan_interface_id",
                sa.Integer(),
                sa.ForeignKey("vlan_interfaces.id", ondelete="SET NULL"),
                nullable=True,
            ),
            sa.Column(
                "created_at",
                sa.Text(),
                nullable=False,
                server_default=sa.text("CURRENT_TIMESTAMP"),
            ),
            sa.UniqueConstraint(
                "vlan_id", "address", name=f"uq_{table_name}_vlan_address"
            ),
        )
        op.create_index(
            f"ix_{table_name}_vlan_key", table_name, ["vlan_id", "address_key"]
        )


def downgrade() -> None:
    for table_name in reversed(_ADDRESS_TABLES):
        op.drop_index(f"ix_{table_name}_vlan_key", table_name=table_name)
        op.drop_table(table_name)
    op.drop_table("vlan_interfaces")
    op.drop_table("vlans")
