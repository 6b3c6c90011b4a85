from __future__ import annotations

import ipaddress

import pytest

from app import repository
from app.addressing import (
    AddressConflict,
    BulkAddOutcome,
    InvalidFormat,
    UnknownVlan,
    bulk_add,
    generate_sequential_addresses,
    parse_network,
    partition_candidates,
)
from app.addressing import reconciler
from app.models import AddressFamily


def _candidates(text: str) -> list:
    return list(generate_sequential_addresses(parse_network(text)))


def _persisted(connection, vlan_id: int, family: AddressFamily = AddressFamily.IPV4) -> list[str]:
    return [record.address for record in repository.list_ip_addresses_for_vlan(connection, family, vlan_id)]


def test_partition_candidates_keeps_candidate_order() -> None:
    candidates = _candidates("192.0.2.0/29")
    existing = {ipaddress.ip_address("192.0.2.2"), ipaddress.ip_address("192.0.2.5")}

    partition = partition_candidates(candidates, existing)

    assert [str(address) for address in partition.new] == [
        "192.0.2.1",
        "192.0.2.3",
        "192.0.2.4",
        "192.0.2.6",
    ]
    assert [str(address) for address in partition.preexisting] == ["192.0.2.2", "192.0.2.5"]


def test_bulk_add_inserts_every_new_address(connection, _create_vlan) -> None:
    vlan = _create_vlan()

    result = bulk_add(connection, _candidates("192.0.2.0/29"), vlan.id)

    assert result.outcome is BulkAddOutcome.ADDED
    assert len(result.new) == 6
    assert result.preexisting == []
    assert result.message == "6 new IP addresses added to Peering LAN."
    assert _persisted(connection, vlan.id) == [f"192.0.2.{octet}" for octet in range(1, 7)]


def test_bulk_add_conflict_writes_nothing(connection, _create_vlan) -> None:
    vlan = _create_vlan()
    repository.bulk_insert_ip_addresses(
        connection, AddressFamily.IPV4, vlan.id, [ipaddress.ip_address("192.0.2.3")]
    )

    with pytest.raises(AddressConflict) as exc_info:
        bulk_add(connection, _candidates("192.0.2.0/29"), vlan.id, skip_existing=False)

    assert exc_info.value.addresses == ["192.0.2.3"]
    assert _persisted(connection, vlan.id) == ["192.0.2.3"]


def test_bulk_add_skip_existing_adds_only_new_addresses(connection, _create_vlan) -> None:
    vlan = _create_vlan()
    repository.bulk_insert_ip_addresses(
        connection, AddressFamily.IPV4, vlan.id, [ipaddress.ip_address("192.0.2.3")]
    )
    before = repository.find_ip_address(connection, AddressFamily.IPV4, vlan.id, "192.0.2.3")

    result = bulk_add(connection, _candidates("192.0.2.0/29"), vlan.id, skip_existing=True)

    assert result.outcome is BulkAddOutcome.ADDED
    assert [str(address) for address in result.preexisting] == ["192.0.2.3"]
    assert len(result.new) == 5
    assert result.message == (
        "5 new IP addresses added to Peering LAN. There were 1 preexisting address(es)."
    )
    assert _persisted(connection, vlan.id) == [f"192.0.2.{octet}" for octet in range(1, 7)]
    after = repository.find_ip_address(connection, AddressFamily.IPV4, vlan.id, "192.0.2.3")
    assert after == before


def test_bulk_add_reports_noop_when_nothing_is_new(connection, _create_vlan) -> None:
    vlan = _create_vlan()
    bulk_add(connection, _candidates("2001:db8::/126"), vlan.id)

    result = bulk_add(connection, _candidates("2001:db8::/126"), vlan.id, skip_existing=True)

    assert result.outcome is BulkAddOutcome.NOOP
    assert result.new == []
    assert len(result.preexisting) == 4
    assert result.message == "No addresses were added. 4 already exist in the database."
    assert len(_persisted(connection, vlan.id, AddressFamily.IPV6)) == 4


def test_bulk_add_with_no_candidates_is_noop(connection, _create_vlan) -> None:
    vlan = _create_vlan()

    result = bulk_add(connection, [], vlan.id)

    assert result.outcome is BulkAddOutcome.NOOP
    assert _persisted(connection, vlan.id) == []


def test_bulk_add_rejects_unknown_vlan(connection) -> None:
    with pytest.raises(UnknownVlan):
        bulk_add(connection, _candidates("192.0.2.0/30"), 999)


def test_same_addresses_may_live_in_different_vlans(connection, _create_vlan) -> None:
    first = _create_vlan(name="Peering LAN 1", number=10)
    second = _create_vlan(name="Peering LAN 2", number=20)

    bulk_add(connection, _candidates("192.0.2.0/30"), first.id)
    result = bulk_add(connection, _candidates("192.0.2.0/30"), second.id)

    assert result.outcome is BulkAddOutcome.ADDED
    assert _persisted(connection, second.id) == ["192.0.2.1", "192.0.2.2"]


def test_constraint_violation_at_commit_becomes_conflict(connection, _create_vlan, monkeypatch) -> None:
    vlan = _create_vlan()
    repository.bulk_insert_ip_addresses(
        connection, AddressFamily.IPV4, vlan.id, [ipaddress.ip_address("192.0.2.3")]
    )
    real_lookup = reconciler._existing_addresses
    calls: list[int] = []

    def _stale_lookup(connection_or_session, vlan_id, candidates):
        calls.append(vlan_id)
        if len(calls) == 1:
            return set()
        return real_lookup(connection_or_session, vlan_id, candidates)

    monkeypatch.setattr(reconciler, "_existing_addresses", _stale_lookup)

    with pytest.raises(AddressConflict) as exc_info:
        bulk_add(connection, _candidates("192.0.2.0/29"), vlan.id)

    assert exc_info.value.addresses == ["192.0.2.3"]
    assert _persisted(connection, vlan.id) == ["192.0.2.3"]


def test_partition_candidates_drops_repeated_candidates() -> None:
    address = ipaddress.ip_address("192.0.2.1")
    stored = ipaddress.ip_address("192.0.2.2")

    partition = partition_candidates([address, stored, address, stored], {stored})

    assert partition.new == [address]
    assert partition.preexisting == [stored]


def test_bulk_add_inserts_repeated_candidate_once(connection, _create_vlan) -> None:
    vlan = _create_vlan()
    address = ipaddress.ip_address("192.0.2.1")

    result = bulk_add(connection, [address, address], vlan.id)

    assert result.outcome is BulkAddOutcome.ADDED
    assert result.new == [address]
    assert result.message == "1 new IP addresses added to Peering LAN."
    assert _persisted(connection, vlan.id) == ["192.0.2.1"]


def test_bulk_add_rejects_mixed_families(connection, _create_vlan) -> None:
    vlan = _create_vlan()
    candidates = [ipaddress.ip_address("2001:db8::1"), ipaddress.ip_address("192.0.2.1")]

    with pytest.raises(InvalidFormat):
        bulk_add(connection, candidates, vlan.id)

    assert _persisted(connection, vlan.id) == []
    assert _persisted(connection, vlan.id, AddressFamily.IPV6) == []
