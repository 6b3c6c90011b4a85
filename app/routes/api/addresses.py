from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app import repository
from app.addressing import (
    AddressConflict,
    AddressInUse,
    BulkAddOutcome,
    RangeTooLarge,
    UnknownVlan,
    bulk_add,
    delete_address,
    generate_sequential_addresses,
    parse_network,
)
from app.dependencies import get_address_family, get_connection
from app.models import AddressFamily

from .schemas import IPAddressBulkCreate, IPAddressInterfaceUpdate
from .utils import bulk_add_payload, ip_address_payload

router = APIRouter()


@router.get("/ip-addresses/{protocol}")
def list_ip_addresses(
    family: AddressFamily = Depends(get_address_family),
    vlan: Optional[int] = Query(default=None),
    connection=Depends(get_connection),
):
    if vlan is None:
        return []
    if repository.get_vlan_by_id(connection, vlan) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown VLAN.")
    records = repository.list_ip_addresses_for_vlan(connection, family, vlan)
    return [ip_address_payload(record) for record in records]


@router.post("/ip-addresses", status_code=status.HTTP_201_CREATED)
def create_ip_addresses(
    payload: IPAddressBulkCreate,
    response: Response,
    connection=Depends(get_connection),
):
    network = parse_network(payload.network)
    try:
        candidates = generate_sequential_addresses(
            network, decimal=payload.decimal, overflow=payload.overflow
        )
        result = bulk_add(connection, candidates, payload.vlan, skip_existing=payload.skip)
    except RangeTooLarge as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except UnknownVlan as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except AddressConflict as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": (
                    f"{exc} You can enable skip to add only the addresses "
                    "that do not already exist."
                ),
                "preexisting": list(exc.addresses),
            },
        ) from exc
    if result.outcome is BulkAddOutcome.NOOP:
        response.status_code = status.HTTP_200_OK
    return bulk_add_payload(result, network=payload.network)


@router.delete(
    "/ip-addresses/{protocol}/{address_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_ip_address(
    address_id: int,
    family: AddressFamily = Depends(get_address_family),
    connection=Depends(get_connection),
):
    try:
        deleted = delete_address(connection, family, address_id)
    except AddressInUse as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    if deleted is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/ip-addresses/{protocol}/{address_id}/interface")
def set_ip_address_interface(
    address_id: int,
    payload: IPAddressInterfaceUpdate,
    family: AddressFamily = Depends(get_address_family),
    connection=Depends(get_connection),
):
    record = repository.get_ip_address_by_id(connection, family, address_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    if payload.vlan_interface_id is not None:
        interface = repository.get_vlan_interface_by_id(
            connection, payload.vlan_interface_id
        )
        if interface is None or interface.vlan_id != record.vlan_id:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="VLAN interface does not belong to the address' VLAN.",
            )
    updated = repository.set_ip_address_interface(
        connection, family, address_id, payload.vlan_interface_id
    )
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ip_address_payload(updated)
