from __future__ import annotations

from typing import Iterable, Sequence


class InvalidFormat(ValueError):
    """Malformed address or network text."""


class RangeTooLarge(ValueError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Network holds {size} addresses which exceeds the limit of {limit}. "
            "Enable overflow to generate it anyway."
        )
        self.size = size
        self.limit = limit


class UnknownVlan(LookupError):
    def __init__(self, vlan_id: int) -> None:
        super().__init__(f"Unknown VLAN: {vlan_id}")
        self.vlan_id = vlan_id


class AddressConflict(Exception):
    def __init__(self, addresses: Iterable[str]) -> None:
        self.addresses: Sequence[str] = list(addresses)
        super().__init__(
            "No addresses were added as the following addresses already exist: "
            + ", ".join(self.addresses)
        )


class AddressInUse(Exception):
    def __init__(self, address: str) -> None:
        super().__init__(f"{address} is assigned to a VLAN interface.")
        self.address = address
