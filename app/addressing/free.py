from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from sqlalchemy.orm import Session

from app import repository
from app.models import AddressFamily, IPAddressRecord

from .codec import Network, address_family, parse_network
from .errors import AddressInUse, UnknownVlan

logger = logging.getLogger(__name__)


def _resolve_scopes(
    network: Optional[str],
) -> dict[AddressFamily, Optional[Network]]:
    if network is None or not network.strip():
        return {AddressFamily.IPV4: None, AddressFamily.IPV6: None}
    parsed = parse_network(network)
    return {address_family(parsed): parsed}


def _require_vlan(
    connection_or_session: sqlite3.Connection | Session, vlan_id: int
) -> None:
    if repository.get_vlan_by_id(connection_or_session, vlan_id) is None:
        raise UnknownVlan(vlan_id)


def find_free_addresses(
    connection_or_session: sqlite3.Connection | Session,
    vlan_id: int,
    network: Optional[str] = None,
) -> list[IPAddressRecord]:
    """Addresses of a VLAN that are not bound to any VLAN interface.

    Without ``network`` both families are searched, IPv4 first. A network
    filter must carry a prefix length; a bare address raises
    ``InvalidFormat``.
    """
    scopes = _resolve_scopes(network)
    _require_vlan(connection_or_session, vlan_id)
    free: list[IPAddressRecord] = []
    for family, scope in scopes.items():
        free.extend(
            repository.query_ip_addresses(
                connection_or_session,
                family,
                vlan_id,
                network=scope,
                free_only=True,
            )
        )
    return free


def delete_free_addresses(
    connection_or_session: sqlite3.Connection | Session,
    vlan_id: int,
    network: Optional[str] = None,
) -> int:
    scopes = _resolve_scopes(network)
    _require_vlan(connection_or_session, vlan_id)
    return repository.delete_free_ip_addresses(connection_or_session, vlan_id, scopes)


def delete_address(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    address_id: int,
) -> IPAddressRecord | None:
    record = repository.get_ip_address_by_id(connection_or_session, family, address_id)
    if record is None:
        return None
    if not record.is_free:
        raise AddressInUse(record.address)
    repository.delete_ip_address(connection_or_session, family, address_id)
    logger.info("Deleted %s from VLAN %s", record.address, record.vlan_id)
    return record
