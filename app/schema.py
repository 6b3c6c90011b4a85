from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import text

Base = declarative_base()


class Vlan(Base):
    __tablename__ = "vlans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    number = Column(Integer)
    created_at = Column(Text, nullable=False, server_default=text("CURRENT_TIMESTAMP"))

    __table_args__ = (
        CheckConstraint(
            "number IS NULL OR (number BETWEEN 1 AND 4094)", name="ck_vlans_number"
        ),
    )


class VlanInterface(Base):
    __tablename__ = "vlan_interfaces"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vlan_id = Column(
        Integer, ForeignKey("vlans.id", ondelete="CASCADE"), nullable=False
    )
    name = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False, server_default=text("CURRENT_TIMESTAMP"))

    __table_args__ = (
        UniqueConstraint("vlan_id", "name", name="uq_vlan_interfaces_vlan_name"),
    )


class IPv4Address(Base):
    __tablename__ = "ipv4_addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vlan_id = Column(
        Integer, ForeignKey("vlans.id", ondelete="CASCADE"), nullable=False
    )
    address = Column(Text, nullable=False)
    address_key = Column(Text, nullable=False)
    vlan_interface_id = Column(
        Integer, ForeignKey("vlan_interfaces.id", ondelete="SET NULL")
    )
    created_at = Column(Text, nullable=False, server_default=text("CURRENT_TIMESTAMP"))

    __table_args__ = (
        UniqueConstraint("vlan_id", "address", name="uq_ipv4_addresses_vlan_address"),
        Index("ix_ipv4_addresses_vlan_key", "vlan_id", "address_key"),
    )


class IPv6Address(Base):
    __tablename__ = "ipv6_addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vlan_id = Column(
        Integer, ForeignKey("vlans.id", ondelete="CASCADE"), nullable=False
    )
    address = Column(Text, nullable=False)
    address_key = Column(Text, nullable=False)
    vlan_interface_id = Column(
        Integer, ForeignKey("vlan_interfaces.id", ondelete="SET NULL")
    )
    created_at = Column(Text, nullable=False, server_default=text("CURRENT_TIMESTAMP"))

    __table_args__ = (
        UniqueConstraint("vlan_id", "address", name="uq_ipv6_addresses_vlan_address"),
        Index("ix_ipv6_addresses_vlan_key", "vlan_id", "address_key"),
    )
