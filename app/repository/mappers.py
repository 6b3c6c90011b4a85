from __future__ import annotations

import sqlite3
from typing import Mapping

from app.models import AddressFamily, IPAddressRecord, Vlan, VlanInterface


def _row_to_vlan(row: sqlite3.Row | Mapping) -> Vlan:
    return Vlan(
        id=row["id"],
        name=row["name"],
        number=row["number"],
        created_at=row["created_at"],
    )


def _row_to_vlan_interface(row: sqlite3.Row | Mapping) -> VlanInterface:
    return VlanInterface(
        id=row["id"],
        vlan_id=row["vlan_id"],
        name=row["name"],
        created_at=row["created_at"],
    )


def _row_to_ip_address(
    row: sqlite3.Row | Mapping, family: AddressFamily
) -> IPAddressRecord:
    return IPAddressRecord(
        id=row["id"],
        family=family,
        vlan_id=row["vlan_id"],
        address=row["address"],
        vlan_interface_id=row["vlan_interface_id"],
        created_at=row["created_at"],
    )
