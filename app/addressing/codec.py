from __future__ import annotations

import ipaddress

from app.models import AddressFamily
from app.utils import AnyAddress as Address
from app.utils import AnyNetwork as Network
from app.utils import address_key

from .errors import InvalidFormat

__all__ = [
    "Address",
    "Network",
    "address_family",
    "address_key",
    "canonical_network",
    "first_address",
    "last_address",
    "parse_address",
    "parse_network",
]


def parse_network(value: str) -> Network:
    """Parse CIDR text such as ``192.0.2.0/24`` or ``2001:db8::/64``.

    The prefix length is mandatory. Host bits are masked off, so
    ``192.0.2.5/24`` parses to ``192.0.2.0/24``.
    """
    text = (value or "").strip()
    if "/" not in text:
        raise InvalidFormat("The network must have a subnet, e.g. 192.0.2.0/24.")
    address_text, _, prefix_text = text.partition("/")
    if not prefix_text.isdigit():
        raise InvalidFormat(f"Invalid prefix length: {prefix_text!r}.")
    parse_address(address_text)
    try:
        return ipaddress.ip_network(text, strict=False)
    except ValueError as exc:
        raise InvalidFormat(f"Invalid network: {text}.") from exc


def parse_address(value: str) -> Address:
    text = (value or "").strip()
    try:
        return ipaddress.ip_address(text)
    except ValueError as exc:
        raise InvalidFormat(f"The IP address format is invalid: {text!r}.") from exc


def first_address(network: Network) -> Address:
    return network.network_address


def last_address(network: Network) -> Address:
    return network.broadcast_address


def address_family(value: Address | Network) -> AddressFamily:
    return AddressFamily(value.version)


def canonical_network(network: Network) -> str:
    return network.with_prefixlen
