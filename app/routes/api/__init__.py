from __future__ import annotations

from fastapi import APIRouter

from . import addresses, system, vlans
from .utils import bulk_add_payload, ip_address_payload, vlan_interface_payload, vlan_payload

router = APIRouter()
router.include_router(system.router)
router.include_router(vlans.router)
router.include_router(addresses.router)

__all__ = [
    "router",
    "bulk_add_payload",
    "ip_address_payload",
    "vlan_interface_payload",
    "vlan_payload",
]
