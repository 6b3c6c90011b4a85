from __future__ import annotations

import logging
import sqlite3
from typing import Iterable, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from app import schema as db_schema
from app.models import Vlan, VlanInterface

from ._db import session_scope, write_session_scope
from .mappers import _row_to_vlan, _row_to_vlan_interface

logger = logging.getLogger(__name__)

_VLAN_COLUMNS = (
    db_schema.Vlan.id,
    db_schema.Vlan.name,
    db_schema.Vlan.number,
    db_schema.Vlan.created_at,
)
_VLAN_INTERFACE_COLUMNS = (
    db_schema.VlanInterface.id,
    db_schema.VlanInterface.vlan_id,
    db_schema.VlanInterface.name,
    db_schema.VlanInterface.created_at,
)


def create_vlan(
    connection_or_session: sqlite3.Connection | Session,
    name: str,
    number: Optional[int] = None,
) -> Vlan:
    with write_session_scope(connection_or_session) as session:
        model = db_schema.Vlan(name=name, number=number)
        session.add(model)
    vlan = get_vlan_by_id(connection_or_session, model.id)
    if vlan is None:
        raise RuntimeError(f"VLAN {model.id} vanished after insert.")
    return vlan


def get_vlan_by_id(
    connection_or_session: sqlite3.Connection | Session, vlan_id: int
) -> Vlan | None:
    with session_scope(connection_or_session) as session:
        row = (
            session.execute(
                select(*_VLAN_COLUMNS).where(db_schema.Vlan.id == vlan_id)
            )
            .mappings()
            .first()
        )
    if row is None:
        return None
    return _row_to_vlan(row)


def list_vlans(
    connection_or_session: sqlite3.Connection | Session,
) -> Iterable[Vlan]:
    with session_scope(connection_or_session) as session:
        rows = (
            session.execute(select(*_VLAN_COLUMNS).order_by(db_schema.Vlan.name))
            .mappings()
            .all()
        )
    return [_row_to_vlan(row) for row in rows]


def update_vlan(
    connection_or_session: sqlite3.Connection | Session,
    vlan_id: int,
    name: Optional[str] = None,
    number: Optional[int] = None,
    number_provided: bool = False,
) -> Vlan | None:
    values: dict[str, object] = {}
    if name is not None:
        values["name"] = name
    if number_provided:
        values["number"] = number
    if values:
        with write_session_scope(connection_or_session) as session:
            session.execute(
                update(db_schema.Vlan)
                .where(db_schema.Vlan.id == vlan_id)
                .values(**values)
            )
    return get_vlan_by_id(connection_or_session, vlan_id)


def delete_vlan(
    connection_or_session: sqlite3.Connection | Session, vlan_id: int
) -> bool:
    with write_session_scope(connection_or_session) as session:
        result = session.execute(
            delete(db_schema.Vlan).where(db_schema.Vlan.id == vlan_id)
        )
    if result.rowcount:
        logger.info("Deleted VLAN %s with its addresses and interfaces", vlan_id)
    return bool(result.rowcount)


def create_vlan_interface(
    connection_or_session: sqlite3.Connection | Session,
    vlan_id: int,
    name: str,
) -> VlanInterface:
    with write_session_scope(connection_or_session) as session:
        model = db_schema.VlanInterface(vlan_id=vlan_id, name=name)
        session.add(model)
    interface = get_vlan_interface_by_id(connection_or_session, model.id)
    if interface is None:
        raise RuntimeError(f"VLAN interface {model.id} vanished after insert.")
    return interface


def get_vlan_interface_by_id(
    connection_or_session: sqlite3.Connection | Session, interface_id: int
) -> VlanInterface | None:
    with session_scope(connection_or_session) as session:
        row = (
            session.execute(
                select(*_VLAN_INTERFACE_COLUMNS).where(
                    db_schema.VlanInterface.id == interface_id
                )
            )
            .mappings()
            .first()
        )
    if row is None:
        return None
    return _row_to_vlan_interface(row)


def list_vlan_interfaces(
    connection_or_session: sqlite3.Connection | Session, vlan_id: int
) -> list[VlanInterface]:
    with session_scope(connection_or_session) as session:
        rows = (
            session.execute(
                select(*_VLAN_INTERFACE_COLUMNS)
                .where(db_schema.VlanInterface.vlan_id == vlan_id)
                .order_by(db_schema.VlanInterface.name)
            )
            .mappings()
            .all()
        )
    return [_row_to_vlan_interface(row) for row in rows]
