from __future__ import annotations

from typing import Iterable, Iterator, Optional

from app.environment import get_max_sequential_addresses
from app.models import AddressFamily

from .codec import Address, Network, address_family, first_address, last_address
from .errors import RangeTooLarge

_GROUP_BITS = 16
_DECIMAL_GROUP_VALUES = 10000


def is_boundary_address(network: Network, address: Address) -> bool:
    """True for the first and last address of a network with four or more addresses.

    Point-to-point and host networks (/31 and /32, /127 and /128) have no
    boundary addresses.
    """
    if network.max_prefixlen - network.prefixlen < 2:
        return False
    return address == first_address(network) or address == last_address(network)


def _decimal_group_values(first: int, last: int) -> Iterator[int]:
    # The low group only takes values whose hex digits are all 0-9, so
    # ::9 is followed by ::10 and ::9999 by ::1:0.
    block = first >> _GROUP_BITS
    while (block << _GROUP_BITS) <= last:
        for digits in range(_DECIMAL_GROUP_VALUES):
            value = (block << _GROUP_BITS) | int(str(digits), 16)
            if value < first:
                continue
            if value > last:
                return
            yield value
        block += 1


def _materialize(
    network: Network, values: Iterable[int], include_boundaries: bool
) -> Iterator[Address]:
    address_type = type(first_address(network))
    for value in values:
        address = address_type(value)
        if not include_boundaries and is_boundary_address(network, address):
            continue
        yield address


def generate_sequential_addresses(
    network: Network,
    *,
    decimal: bool = False,
    overflow: bool = False,
    include_boundaries: Optional[bool] = None,
    max_addresses: Optional[int] = None,
) -> Iterator[Address]:
    """Yield every host address of ``network`` in ascending order.

    IPv4 networks exclude the network and broadcast addresses unless
    ``include_boundaries`` is set; IPv6 networks include everything by
    default. ``decimal`` and ``overflow`` only apply to IPv6: ``decimal``
    restricts the lowest group to values that read as decimal numbers, so it
    yields fewer addresses than ``network.num_addresses`` (100 for a /120).
    ``overflow`` lifts the size limit (``max_addresses`` or
    ``VLANPOOL_MAX_SEQUENTIAL_ADDRESSES``). The size check happens before
    the first address is produced.
    """
    family = address_family(network)
    is_ipv6 = family is AddressFamily.IPV6
    if include_boundaries is None:
        include_boundaries = is_ipv6

    if is_ipv6 and not overflow:
        limit = max_addresses if max_addresses is not None else get_max_sequential_addresses()
        if network.num_addresses > limit:
            raise RangeTooLarge(int(network.num_addresses), limit)

    first = int(first_address(network))
    last = int(last_address(network))
    if is_ipv6 and decimal:
        values: Iterable[int] = _decimal_group_values(first, last)
    else:
        values = range(first, last + 1)
    return _materialize(network, values, include_boundaries)
