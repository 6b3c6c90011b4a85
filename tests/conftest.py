from __future__ import annotations

import sqlite3
from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient as FastAPITestClient

from app import db, repository
from app.main import app
from app.models import Vlan


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("VLANPOOL_DB_PATH", str(db_file))
    monkeypatch.delenv("VLANPOOL_MAX_SEQUENTIAL_ADDRESSES", raising=False)
    return db_file


@pytest.fixture
def client(db_path) -> Generator[FastAPITestClient, None, None]:
    with FastAPITestClient(app) as test_client:
        yield test_client


@pytest.fixture
def _setup_connection(db_path) -> Callable[[], sqlite3.Connection]:
    def _factory() -> sqlite3.Connection:
        connection = db.connect(str(db_path))
        db.init_db(connection)
        return connection

    return _factory


@pytest.fixture
def connection(_setup_connection) -> Generator[sqlite3.Connection, None, None]:
    connection = _setup_connection()
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def _create_vlan(connection) -> Callable[..., Vlan]:
    def _factory(name: str = "Peering LAN", number: int | None = 10) -> Vlan:
        return repository.create_vlan(connection, name=name, number=number)

    return _factory
