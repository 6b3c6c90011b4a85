from __future__ import annotations

import os
from functools import lru_cache
from typing import Iterator

from app import db
from app.models import AddressFamily
from fastapi import HTTPException, status
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker


def get_db_path() -> str:
    return os.getenv("VLANPOOL_DB_PATH", "vlanpool.db")


@lru_cache(maxsize=8)
def _get_session_factory(db_path: str) -> sessionmaker[Session]:
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
        future=True,
    )
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_db_session(db_path: str | None = None) -> Session:
    target_db_path = db_path or get_db_path()
    session = _get_session_factory(target_db_path)()
    session.execute(text("PRAGMA foreign_keys = ON"))
    return session


def get_connection():
    connection = db.connect(get_db_path())
    try:
        yield connection
    finally:
        connection.close()


def get_address_family(protocol: int) -> AddressFamily:
    try:
        return AddressFamily.from_protocol(protocol)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Unknown protocol."
        ) from exc
