from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.addressing import canonical_network, parse_network


def _required_name(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("Name is required.")
    return stripped


class VlanCreate(BaseModel):
    name: str
    number: Optional[int] = Field(default=None, ge=1, le=4094)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        return _required_name(value)


class VlanUpdate(BaseModel):
    name: Optional[str] = None
    number: Optional[int] = Field(default=None, ge=1, le=4094)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _required_name(value)


class VlanInterfaceCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        return _required_name(value)


class IPAddressBulkCreate(BaseModel):
    vlan: int
    network: str
    skip: bool = False
    decimal: bool = False
    overflow: bool = False

    @field_validator("network")
    @classmethod
    def normalize_network(cls, value: str) -> str:
        return canonical_network(parse_network(value))


class IPAddressInterfaceUpdate(BaseModel):
    vlan_interface_id: Optional[int] = None
