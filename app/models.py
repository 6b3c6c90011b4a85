from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class AddressFamily(IntEnum):
    IPV4 = 4
    IPV6 = 6

    @classmethod
    def from_protocol(cls, value: "AddressFamily | int | str") -> "AddressFamily":
        if isinstance(value, cls):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Unknown protocol: {value!r}") from exc


@dataclass
class Vlan:
    id: int
    name: str
    number: Optional[int]
    created_at: str


@dataclass
class VlanInterface:
    id: int
    vlan_id: int
    name: str
    created_at: str


@dataclass
class IPAddressRecord:
    id: int
    family: AddressFamily
    vlan_id: int
    address: str
    vlan_interface_id: Optional[int]
    created_at: str

    @property
    def is_free(self) -> bool:
        return self.vlan_interface_id is None
