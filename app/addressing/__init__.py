from app.addressing.codec import (
    Address,
    Network,
    address_family,
    address_key,
    canonical_network,
    first_address,
    last_address,
    parse_address,
    parse_network,
)
from app.addressing.errors import (
    AddressConflict,
    AddressInUse,
    InvalidFormat,
    RangeTooLarge,
    UnknownVlan,
)
from app.addressing.free import (
    delete_address,
    delete_free_addresses,
    find_free_addresses,
)
from app.addressing.generator import generate_sequential_addresses, is_boundary_address
from app.addressing.reconciler import (
    AddressPartition,
    BulkAddOutcome,
    BulkAddResult,
    bulk_add,
    partition_candidates,
)

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
    "AddressConflict",
    "AddressInUse",
    "InvalidFormat",
    "RangeTooLarge",
    "UnknownVlan",
    "generate_sequential_addresses",
    "is_boundary_address",
    "AddressPartition",
    "BulkAddOutcome",
    "BulkAddResult",
    "bulk_add",
    "partition_candidates",
    "find_free_addresses",
    "delete_free_addresses",
    "delete_address",
]
