from __future__ import annotations

from app import db


def test_connect_applies_sqlite_pragmas(tmp_path) -> None:
    connection = db.connect(str(tmp_path / "pool.db"))
    try:
        journal_mode = connection.execute("PRAGMA journal_mode").fetchone()[0]
        synchronous = connection.execute("PRAGMA synchronous").fetchone()[0]
        busy_timeout = connection.execute("PRAGMA busy_timeout").fetchone()[0]
        foreign_keys = connection.execute("PRAGMA foreign_keys").fetchone()[0]

        assert str(journal_mode).lower() == "wal"
        assert int(synchronous) == 1
        assert int(busy_timeout) == 5000
        assert int(foreign_keys) == 1
    finally:
        connection.close()


def test_connected_schema_cascades_vlan_deletes(tmp_path) -> None:
    connection = db.connect(str(tmp_path / "cascade.db"))
    try:
        db.init_db(connection)
        connection.execute("INSERT INTO vlans (id, name) VALUES (1, 'Peering LAN')")
        connection.execute(
            "INSERT INTO ipv6_addresses (vlan_id, address, address_key) "
            "VALUES (1, '2001:db8::1', :key)",
            {"key": "20010db8" + "0" * 23 + "1"},
        )
        connection.execute("DELETE FROM vlans WHERE id = 1")

        remaining = connection.execute("SELECT COUNT(*) FROM ipv6_addresses").fetchone()[0]
        assert remaining == 0
    finally:
        connection.close()
