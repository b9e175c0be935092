from __future__ import annotations

from dataclasses import replace

import pytest

from src.event_registration.event_registration.core.enums import RegistrationField
from src.event_registration.event_registration.core.exceptions import NotFoundError
from src.event_registration.event_registration.registrations.model import Registration
from src.event_registration.event_registration.registrations.mysql_registration_repository import (
    MySQLRegistrationRepository,
)


@pytest.fixture
def repo(sqlite_conn):
    return MySQLRegistrationRepository(sqlite_conn)


def test_registration_lifecycle_scenario(repo, jane):
    repo.create(jane)
    assert repo.get_by_id(1) == jane

    repo.update_field(1, "Seat", "14C")
    assert repo.get_by_id(1).seat == "14C"

    repo.delete(1)
    with pytest.raises(NotFoundError):
        repo.get_by_id(1)


def test_inserted_row_fetched_field_for_field(repo, jane):
    other = Registration(id=7, attendee_id="A2", guest_name="Trần Thị B", bin=0, meal_id="FISH", drink="Tea", seat="1A")
    repo.create(jane)
    repo.create(other)

    assert repo.get_by_id(7) == other
    assert isinstance(repo.get_by_id(7).bin, int)


def test_list_all_empty_table_returns_empty_list(repo):
    assert repo.list_all() == []


def test_list_all_returns_every_row(repo, jane):
    second = replace(jane, id=2, guest_name="John Doe", seat="12C")
    repo.create(second)
    repo.create(jane)

    assert repo.list_all() == [jane, second]


def test_get_missing_id_raises_not_found(repo, jane):
    repo.create(jane)
    with pytest.raises(NotFoundError):
        repo.get_by_id(2)


def test_update_missing_id_raises_and_does_not_mutate(repo, jane):
    repo.create(jane)

    with pytest.raises(NotFoundError):
        repo.update_field(2, RegistrationField.SEAT, "14C")

    assert repo.list_all() == [jane]


def test_update_with_unchanged_value_is_not_not_found(repo, jane):
    repo.create(jane)
    repo.update_field(1, RegistrationField.SEAT, "12B")
    assert repo.get_by_id(1) == jane


def test_update_int_column(repo, jane):
    repo.create(jane)
    repo.update_field(1, RegistrationField.BIN, 9)
    assert repo.get_by_id(1).bin == 9


def test_delete_twice_second_call_not_found(repo, jane):
    repo.create(jane)
    repo.delete(1)

    assert repo.list_all() == []
    with pytest.raises(NotFoundError):
        repo.delete(1)


def test_list_by_field_matches_and_empty(repo, jane):
    john = replace(jane, id=2, guest_name="John Doe", meal_id="BEEF")
    mai = replace(jane, id=3, attendee_id="A2", guest_name="Mai", bin=5)
    for r in (jane, john, mai):
        repo.create(r)

    assert repo.list_by_field(RegistrationField.ATTENDEE_ID, "A1") == [jane, john]
    assert repo.list_by_field("BIN", 5) == [mai]
    assert repo.list_by_field("MealID", "HALAL") == []


def test_list_by_field_value_is_bound_not_interpolated(repo, jane):
    repo.create(jane)

    assert repo.list_by_field("GuestName", "x' OR '1'='1") == []
    assert repo.list_by_field("GuestName", "Jane Doe") == [jane]
