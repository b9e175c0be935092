from __future__ import annotations

from ..core.constants import REGISTRATIONS_TABLE
from ..core.enums import RegistrationField
from ..database.record_store import TableSchema, schema_columns
from .model import Registration

REGISTRATION_SCHEMA: TableSchema[Registration] = TableSchema(
    table=REGISTRATIONS_TABLE,
    columns=schema_columns(
        (RegistrationField.ID, "id", int),
        (RegistrationField.ATTENDEE_ID, "attendee_id", str),
        (RegistrationField.GUEST_NAME, "guest_name", str),
        (RegistrationField.BIN, "bin", int),
        (RegistrationField.MEAL_ID, "meal_id", str),
        (RegistrationField.DRINK, "drink", str),
        (RegistrationField.SEAT, "seat", str),
    ),
    id_column=RegistrationField.ID.value,
    factory=Registration,
    entity_label="Registration",
)
