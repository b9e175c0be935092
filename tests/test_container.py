from __future__ import annotations

import pytest

from src.event_registration.event_registration.accounts.model import Account
from src.event_registration.event_registration.accounts.passwords import hash_password, new_salt
from src.event_registration.event_registration.accounts.schema import ACCOUNT_SCHEMAS
from src.event_registration.event_registration.container import build_container_for
from src.event_registration.event_registration.core.enums import AccountClass
from src.event_registration.event_registration.core.exceptions import AuthServiceError
from src.event_registration.event_registration.database.record_store import MySQLRecordStore


def provision(conn, account_class: AccountClass, username: int, password: str) -> None:
    salt = new_salt()
    table = MySQLRecordStore(conn, ACCOUNT_SCHEMAS[account_class])
    table.create(Account(username=username, password_hash=hash_password(password, salt), salt=salt))


def test_container_wires_login_against_database(sqlite_conn):
    container = build_container_for(sqlite_conn)
    provision(sqlite_conn, AccountClass.ATTENDEE, 1001, "attendee123")
    provision(sqlite_conn, AccountClass.ADMINISTRATOR, 1, "admin123")

    auth = container.auth_service
    assert auth.attendee_login(1001, "attendee123") is True
    assert auth.attendee_login(1001, "admin123") is False
    assert auth.admin_login(1, "admin123") is True

    with pytest.raises(AuthServiceError):
        auth.admin_login(1001, "attendee123")


def test_container_login_when_database_down(broken_conn):
    container = build_container_for(broken_conn)

    with pytest.raises(AuthServiceError):
        container.auth_service.attendee_login(1001, "attendee123")


def test_container_registrations_share_connection(sqlite_conn, jane):
    container = build_container_for(sqlite_conn)
    container.registrations_repo.create(jane)

    assert container.conn is sqlite_conn
    assert container.registrations_repo.list_by_field("AttendeeID", "A1") == [jane]
