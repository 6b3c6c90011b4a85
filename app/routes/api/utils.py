from __future__ import annotations

from typing import Optional

from app.addressing import BulkAddResult
from app.models import IPAddressRecord, Vlan, VlanInterface


def vlan_payload(vlan: Vlan) -> dict:
    return {
        "id": vlan.id,
        "name": vlan.name,
        "number": vlan.number,
        "created_at": vlan.created_at,
    }


def vlan_interface_payload(interface: VlanInterface) -> dict:
    return {
        "id": interface.id,
        "vlan_id": interface.vlan_id,
        "name": interface.name,
        "created_at": interface.created_at,
    }


def ip_address_payload(record: IPAddressRecord) -> dict:
    return {
        "id": record.id,
        "protocol": int(record.family),
        "vlan_id": record.vlan_id,
        "address": record.address,
        "vlan_interface_id": record.vlan_interface_id,
        "free": record.is_free,
        "created_at": record.created_at,
    }


def bulk_add_payload(result: BulkAddResult, network: Optional[str] = None) -> dict:
    return {
        "outcome": result.outcome.value,
        "message": result.message,
        "vlan": vlan_payload(result.vlan),
        "network": network,
        "new": [str(address) for address in result.new],
        "preexisting": [str(address) for address in result.preexisting],
    }
