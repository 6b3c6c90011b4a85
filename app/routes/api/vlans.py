from __future__ import annotations

import sqlite3
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app import repository
from app.addressing import (
    InvalidFormat,
    UnknownVlan,
    address_family,
    delete_free_addresses,
    find_free_addresses,
    parse_address,
)
from app.dependencies import get_connection

from .schemas import VlanCreate, VlanInterfaceCreate, VlanUpdate
from .utils import ip_address_payload, vlan_interface_payload, vlan_payload

router = APIRouter()


def _get_vlan_or_404(connection, vlan_id: int):
    vlan = repository.get_vlan_by_id(connection, vlan_id)
    if vlan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown VLAN.")
    return vlan


@router.get("/vlans")
def list_vlans(connection=Depends(get_connection)):
    return [vlan_payload(vlan) for vlan in repository.list_vlans(connection)]


@router.post("/vlans", status_code=status.HTTP_201_CREATED)
def create_vlan(payload: VlanCreate, connection=Depends(get_connection)):
    try:
        vlan = repository.create_vlan(connection, name=payload.name, number=payload.number)
    except sqlite3.IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="VLAN name already exists."
        ) from exc
    return vlan_payload(vlan)


@router.get("/vlans/{vlan_id}")
def get_vlan(vlan_id: int, connection=Depends(get_connection)):
    return vlan_payload(_get_vlan_or_404(connection, vlan_id))


@router.patch("/vlans/{vlan_id}")
def update_vlan(vlan_id: int, payload: VlanUpdate, connection=Depends(get_connection)):
    _get_vlan_or_404(connection, vlan_id)
    try:
        updated = repository.update_vlan(
            connection,
            vlan_id,
            name=payload.name,
            number=payload.number,
            number_provided="number" in payload.model_fields_set,
        )
    except sqlite3.IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="VLAN name already exists."
        ) from exc
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown VLAN.")
    return vlan_payload(updated)


@router.delete("/vlans/{vlan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vlan(vlan_id: int, connection=Depends(get_connection)):
    if not repository.delete_vlan(connection, vlan_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown VLAN.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/vlans/{vlan_id}/interfaces")
def list_vlan_interfaces(vlan_id: int, connection=Depends(get_connection)):
    _get_vlan_or_404(connection, vlan_id)
    return [
        vlan_interface_payload(interface)
        for interface in repository.list_vlan_interfaces(connection, vlan_id)
    ]


@router.post("/vlans/{vlan_id}/interfaces", status_code=status.HTTP_201_CREATED)
def create_vlan_interface(
    vlan_id: int,
    payload: VlanInterfaceCreate,
    connection=Depends(get_connection),
):
    _get_vlan_or_404(connection, vlan_id)
    try:
        interface = repository.create_vlan_interface(
            connection, vlan_id=vlan_id, name=payload.name
        )
    except sqlite3.IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Interface name already exists in this VLAN.",
        ) from exc
    return vlan_interface_payload(interface)


@router.get("/vlans/{vlan_id}/ip-addresses/{address}")
def get_vlan_ip_address(vlan_id: int, address: str, connection=Depends(get_connection)):
    _get_vlan_or_404(connection, vlan_id)
    try:
        parsed = parse_address(address)
    except InvalidFormat as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    record = repository.find_ip_address(
        connection, address_family(parsed), vlan_id, str(parsed)
    )
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ip_address_payload(record)


@router.get("/vlans/{vlan_id}/free-addresses")
def list_free_addresses(
    vlan_id: int,
    network: Optional[str] = Query(default=None),
    connection=Depends(get_connection),
):
    try:
        records = find_free_addresses(connection, vlan_id, network)
    except InvalidFormat as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except UnknownVlan as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {
        "vlan_id": vlan_id,
        "network": network or "",
        "ip_addresses": [ip_address_payload(record) for record in records],
    }


@router.delete("/vlans/{vlan_id}/free-addresses")
def remove_free_addresses(
    vlan_id: int,
    network: Optional[str] = Query(default=None),
    connection=Depends(get_connection),
):
    try:
        deleted = delete_free_addresses(connection, vlan_id, network)
    except InvalidFormat as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except UnknownVlan as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    vlan = _get_vlan_or_404(connection, vlan_id)
    return {
        "deleted": deleted,
        "message": f"The free IP addresses of VLAN {vlan.name} have been deleted.",
    }
