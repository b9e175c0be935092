from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from src.event_registration.event_registration.database.bootstrap import _strip_create_db_and_use
from src.event_registration.event_registration.database.connection import DatabaseConnection
from src.event_registration.event_registration.registrations.model import Registration

SCHEMA_SQL = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


class SQLiteConnection(DatabaseConnection):
    """Same factory contract as the MySQL one, backed by a SQLite file."""

    placeholder = "?"
    driver_errors = (sqlite3.Error,)

    def __init__(self, path: Path):
        self._path = str(path)
        self.connects = 0

    def connect(self):
        self.connects += 1
        return sqlite3.connect(self._path)


class BrokenConnection(DatabaseConnection):
    placeholder = "?"
    driver_errors = (sqlite3.Error,)

    def __init__(self):
        self.connects = 0

    def connect(self):
        self.connects += 1
        raise sqlite3.OperationalError("unable to open database file")


@pytest.fixture
def sqlite_conn(tmp_path) -> SQLiteConnection:
    path = tmp_path / "event_registration.db"
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(_strip_create_db_and_use(SCHEMA_SQL.read_text(encoding="utf-8")))
        conn.commit()
    finally:
        conn.close()
    return SQLiteConnection(path)


@pytest.fixture
def empty_conn(tmp_path) -> SQLiteConnection:
    # No schema applied: every statement fails with "no such table".
    return SQLiteConnection(tmp_path / "empty.db")


@pytest.fixture
def broken_conn() -> BrokenConnection:
    return BrokenConnection()


@pytest.fixture
def jane() -> Registration:
    return Registration(
        id=1,
        attendee_id="A1",
        guest_name="Jane Doe",
        bin=3,
        meal_id="VEG",
        drink="Water",
        seat="12B",
    )
