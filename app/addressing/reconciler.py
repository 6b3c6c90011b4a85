from __future__ import annotations

import ipaddress
import logging
import sqlite3
from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, Iterable, Sequence

from sqlalchemy.orm import Session

from app import repository
from app.models import Vlan

from .codec import Address, address_family
from .errors import AddressConflict, InvalidFormat, UnknownVlan

logger = logging.getLogger(__name__)


class BulkAddOutcome(str, Enum):
    ADDED = "added"
    NOOP = "noop"


@dataclass
class AddressPartition:
    new: list[Address] = field(default_factory=list)
    preexisting: list[Address] = field(default_factory=list)


@dataclass
class BulkAddResult:
    outcome: BulkAddOutcome
    vlan: Vlan
    new: list[Address] = field(default_factory=list)
    preexisting: list[Address] = field(default_factory=list)
    skip_existing: bool = False

    @property
    def message(self) -> str:
        if self.outcome is BulkAddOutcome.NOOP:
            return (
                f"No addresses were added. {len(self.preexisting)} already exist "
                "in the database."
            )
        message = f"{len(self.new)} new IP addresses added to {self.vlan.name}."
        if self.skip_existing:
            message += (
                f" There were {len(self.preexisting)} preexisting address(es)."
            )
        return message


def partition_candidates(
    candidates: Iterable[Address], existing: Collection[Address]
) -> AddressPartition:
    partition = AddressPartition()
    seen: set[Address] = set()
    for address in candidates:
        if address in seen:
            continue
        seen.add(address)
        if address in existing:
            partition.preexisting.append(address)
        else:
            partition.new.append(address)
    return partition


def _existing_addresses(
    connection_or_session: sqlite3.Connection | Session,
    vlan_id: int,
    candidates: Sequence[Address],
) -> set[Address]:
    family = address_family(candidates[0])
    span = ipaddress.summarize_address_range(min(candidates), max(candidates))
    existing: set[Address] = set()
    for network in span:
        records = repository.query_ip_addresses(
            connection_or_session, family, vlan_id, network=network
        )
        existing.update(ipaddress.ip_address(record.address) for record in records)
    return existing


def bulk_add(
    connection_or_session: sqlite3.Connection | Session,
    candidates: Iterable[Address],
    vlan_id: int,
    skip_existing: bool = False,
) -> BulkAddResult:
    """Add every candidate address that the VLAN does not hold yet.

    Raises ``AddressConflict`` without writing anything when some candidates
    already exist and ``skip_existing`` is false. Returns a ``NOOP`` result
    when nothing is left to add; otherwise the new addresses are inserted in
    a single transaction. Repeated candidates count once; candidates of
    both families raise ``InvalidFormat``.
    """
    vlan = repository.get_vlan_by_id(connection_or_session, vlan_id)
    if vlan is None:
        raise UnknownVlan(vlan_id)

    ordered = list(candidates)
    if not ordered:
        return BulkAddResult(
            outcome=BulkAddOutcome.NOOP, vlan=vlan, skip_existing=skip_existing
        )
    if len({address.version for address in ordered}) > 1:
        raise InvalidFormat("Candidates mix IPv4 and IPv6 addresses.")

    existing = _existing_addresses(connection_or_session, vlan_id, ordered)
    partition = partition_candidates(ordered, existing)

    if partition.preexisting and not skip_existing:
        logger.warning(
            "Refusing to add %d addresses to VLAN %s: %d already exist",
            len(ordered),
            vlan_id,
            len(partition.preexisting),
        )
        raise AddressConflict(str(address) for address in partition.preexisting)

    if not partition.new:
        return BulkAddResult(
            outcome=BulkAddOutcome.NOOP,
            vlan=vlan,
            preexisting=partition.preexisting,
            skip_existing=skip_existing,
        )

    family = address_family(partition.new[0])
    try:
        repository.bulk_insert_ip_addresses(
            connection_or_session, family, vlan_id, partition.new
        )
    except sqlite3.IntegrityError as exc:
        raced = _existing_addresses(connection_or_session, vlan_id, partition.new)
        late = [address for address in partition.new if address in raced]
        logger.warning(
            "Bulk add to VLAN %s lost a race on %d addresses", vlan_id, len(late)
        )
        if not late:
            raise
        raise AddressConflict(str(address) for address in late) from exc

    logger.info(
        "Added %d addresses to VLAN %s (%d preexisting)",
        len(partition.new),
        vlan_id,
        len(partition.preexisting),
    )
    return BulkAddResult(
        outcome=BulkAddOutcome.ADDED,
        vlan=vlan,
        new=partition.new,
        preexisting=partition.preexisting,
        skip_existing=skip_existing,
    )
