from __future__ import annotations

from typing import Dict

from ..core.constants import ADMINISTRATORS_TABLE, ATTENDEE_ACCOUNTS_TABLE
from ..core.enums import AccountClass, AccountField
from ..database.record_store import TableSchema, schema_columns
from .model import Account

_ACCOUNT_COLUMNS = schema_columns(
    (AccountField.USERNAME, "username", int),
    (AccountField.PASSWORD_HASH, "password_hash", str),
    (AccountField.SALT, "salt", str),
)


def _account_schema(table: str, label: str) -> TableSchema[Account]:
    return TableSchema(
        table=table,
        columns=_ACCOUNT_COLUMNS,
        id_column=AccountField.USERNAME.value,
        factory=Account,
        entity_label=label,
    )


ACCOUNT_SCHEMAS: Dict[AccountClass, TableSchema[Account]] = {
    AccountClass.ATTENDEE: _account_schema(ATTENDEE_ACCOUNTS_TABLE, "Attendee"),
    AccountClass.ADMINISTRATOR: _account_schema(ADMINISTRATORS_TABLE, "Administrator"),
}
