from __future__ import annotations

import logging
import sqlite3
from typing import Mapping, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from app import schema as db_schema
from app.models import AddressFamily, IPAddressRecord
from app.utils import (
    AnyAddress,
    AnyNetwork,
    address_key,
    network_key_bounds,
    normalize_ip_address,
)

from ._db import session_scope, write_session_scope
from .mappers import _row_to_ip_address

logger = logging.getLogger(__name__)

_ADDRESS_MODELS: dict[AddressFamily, type] = {
    AddressFamily.IPV4: db_schema.IPv4Address,
    AddressFamily.IPV6: db_schema.IPv6Address,
}


def _address_model(family: AddressFamily):
    return _ADDRESS_MODELS[AddressFamily.from_protocol(family)]


def _record_select(model):
    return select(
        model.id,
        model.vlan_id,
        model.address,
        model.vlan_interface_id,
        model.created_at,
    )


def find_ip_address(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    vlan_id: int,
    address: str,
) -> IPAddressRecord | None:
    model = _address_model(family)
    with session_scope(connection_or_session) as session:
        row = (
            session.execute(
                _record_select(model).where(
                    model.vlan_id == vlan_id,
                    model.address == normalize_ip_address(address),
                )
            )
            .mappings()
            .first()
        )
    if row is None:
        return None
    return _row_to_ip_address(row, family)


def get_ip_address_by_id(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    address_id: int,
) -> IPAddressRecord | None:
    model = _address_model(family)
    with session_scope(connection_or_session) as session:
        row = (
            session.execute(_record_select(model).where(model.id == address_id))
            .mappings()
            .first()
        )
    if row is None:
        return None
    return _row_to_ip_address(row, family)


def query_ip_addresses(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    vlan_id: int,
    network: Optional[AnyNetwork] = None,
    free_only: bool = False,
) -> list[IPAddressRecord]:
    """Records of one VLAN in ascending address order.

    ``network`` restricts the result to addresses inside that range and
    ``free_only`` to addresses not bound to a VLAN interface.
    """
    model = _address_model(family)
    statement = _record_select(model).where(model.vlan_id == vlan_id)
    if network is not None:
        if network.version != int(family):
            return []
        first_key, last_key = network_key_bounds(network)
        statement = statement.where(
            model.address_key >= first_key, model.address_key <= last_key
        )
    if free_only:
        statement = statement.where(model.vlan_interface_id.is_(None))
    with session_scope(connection_or_session) as session:
        rows = session.execute(statement.order_by(model.address_key)).mappings().all()
    return [_row_to_ip_address(row, family) for row in rows]


def list_ip_addresses_for_vlan(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    vlan_id: int,
) -> list[IPAddressRecord]:
    return query_ip_addresses(connection_or_session, family, vlan_id)


def bulk_insert_ip_addresses(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    vlan_id: int,
    addresses: Sequence[AnyAddress],
) -> int:
    """Insert all addresses in one transaction, or none of them.

    Raises ``sqlite3.IntegrityError`` when any address already exists in the
    VLAN; nothing is written in that case.
    """
    if not addresses:
        return 0
    model = _address_model(family)
    values = [
        {
            "vlan_id": vlan_id,
            "address": str(address),
            "address_key": address_key(address),
        }
        for address in addresses
    ]
    with write_session_scope(connection_or_session) as session:
        session.execute(insert(model), values)
    logger.info(
        "Inserted %d IPv%d addresses into VLAN %s", len(values), int(family), vlan_id
    )
    return len(values)


def set_ip_address_interface(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    address_id: int,
    vlan_interface_id: Optional[int],
) -> IPAddressRecord | None:
    model = _address_model(family)
    with write_session_scope(connection_or_session) as session:
        result = session.execute(
            update(model)
            .where(model.id == address_id)
            .values(vlan_interface_id=vlan_interface_id)
        )
    if not result.rowcount:
        return None
    return get_ip_address_by_id(connection_or_session, family, address_id)


def delete_ip_address(
    connection_or_session: sqlite3.Connection | Session,
    family: AddressFamily,
    address_id: int,
) -> bool:
    model = _address_model(family)
    with write_session_scope(connection_or_session) as session:
        result = session.execute(delete(model).where(model.id == address_id))
    return bool(result.rowcount)


def delete_free_ip_addresses(
    connection_or_session: sqlite3.Connection | Session,
    vlan_id: int,
    scopes: Mapping[AddressFamily, Optional[AnyNetwork]],
) -> int:
    """Delete unbound records of a VLAN for each family in ``scopes``.

    A family mapped to a network only loses addresses inside that network.
    All families are handled in a single transaction.
    """
    deleted = 0
    with write_session_scope(connection_or_session) as session:
        for family, network in scopes.items():
            model = _address_model(family)
            statement = delete(model).where(
                model.vlan_id == vlan_id, model.vlan_interface_id.is_(None)
            )
            if network is not None:
                first_key, last_key = network_key_bounds(network)
                statement = statement.where(
                    model.address_key >= first_key, model.address_key <= last_key
                )
            deleted += int(session.execute(statement).rowcount or 0)
    logger.info("Deleted %d free addresses from VLAN %s", deleted, vlan_id)
    return deleted
