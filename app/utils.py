from __future__ import annotations

import ipaddress
from typing import Union

_KEY_WIDTH = {4: 8, 6: 32}

AnyAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
AnyNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


def address_key(address: AnyAddress) -> str:
    """Fixed-width hex form of an address; sorts like the numeric value."""
    return format(int(address), f"0{_KEY_WIDTH[address.version]}x")


def network_key_bounds(network: AnyNetwork) -> tuple[str, str]:
    return address_key(network.network_address), address_key(
        network.broadcast_address
    )


def normalize_ip_address(value: str) -> str:
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError as exc:
        raise ValueError("Invalid IP address.") from exc
