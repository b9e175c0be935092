from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Sequence, Tuple, TypeVar, Union

from ..common.validators import require_non_empty, require_type
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone

logger = logging.getLogger(__name__)

T = TypeVar("T")

FieldName = Union[str, Enum]


@dataclass(frozen=True)
class Column:
    """One stored column: SQL name, entity attribute and declared type."""

    name: str
    attr: str
    py_type: type


@dataclass(frozen=True)
class TableSchema(Generic[T]):
    """Shape of one entity kind mapped to one table.

    `columns` is the closed allow-list of column names; SQL text is only ever
    built from these names, never from caller input.
    """

    table: str
    columns: Tuple[Column, ...]
    id_column: str
    factory: Callable[..., T]
    entity_label: str = "Record"

    def column(self, field_name: FieldName) -> Column:
        name = field_name.value if isinstance(field_name, Enum) else field_name
        for col in self.columns:
            if col.name == name:
                return col
        raise ValidationError(f"Unknown {self.entity_label} field: {name!r}")

    @property
    def id(self) -> Column:
        return self.column(self.id_column)

    @property
    def select_list(self) -> str:
        return ", ".join(col.name for col in self.columns)

    def to_entity(self, row: Dict[str, Any]) -> T:
        values = {}
        for col in self.columns:
            raw = row[col.name]
            if raw is None:
                # Partial rows are never valid; the table itself is damaged.
                raise StorageError(f"{self.entity_label}.{col.name} is NULL in {self.table}")
            values[col.attr] = col.py_type(raw)
        return self.factory(**values)

    def check_value(self, col: Column, value: Any) -> Any:
        require_type(value, col.py_type, f"{self.entity_label}.{col.name}")
        if col.py_type is str:
            require_non_empty(value, f"{self.entity_label}.{col.name}")
        return value


class MySQLRecordStore(Generic[T]):
    """Generic CRUD over the single table described by a TableSchema.

    Values always travel as bound parameters. Driver failures surface as
    StorageError (see db_cursor); absent targets raise NotFoundError.
    """

    def __init__(self, conn_factory: DatabaseConnection, schema: TableSchema[T]):
        self._conn_factory = conn_factory
        self._schema = schema

    @property
    def schema(self) -> TableSchema[T]:
        return self._schema

    @property
    def _ph(self) -> str:
        return self._conn_factory.placeholder

    def _check_id(self, record_id: Any) -> Any:
        return self._schema.check_value(self._schema.id, record_id)

    def create(self, entity: T) -> None:
        s = self._schema
        values = [s.check_value(col, getattr(entity, col.attr)) for col in s.columns]
        placeholders = ", ".join([self._ph] * len(values))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {s.table} ({s.select_list}) VALUES ({placeholders})",
                tuple(values),
            )
        logger.debug("Created %s %s=%r", s.entity_label, s.id_column, getattr(entity, s.id.attr))

    def list_all(self) -> List[T]:
        s = self._schema
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {s.select_list} FROM {s.table} ORDER BY {s.id_column}")
            rows = fetchall(cur)
        return [s.to_entity(r) for r in rows]

    def get_by_id(self, record_id: Any) -> T:
        s = self._schema
        self._check_id(record_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {s.select_list} FROM {s.table} WHERE {s.id_column}={self._ph}",
                (record_id,),
            )
            row = fetchone(cur)
        if not row:
            raise NotFoundError(f"{s.entity_label} with {s.id_column} {record_id} not found")
        return s.to_entity(row)

    def list_by_field(self, field_name: FieldName, value: Any) -> List[T]:
        s = self._schema
        col = s.column(field_name)
        s.check_value(col, value)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {s.select_list} FROM {s.table} WHERE {col.name}={self._ph} "
                f"ORDER BY {s.id_column}",
                (value,),
            )
            rows = fetchall(cur)
        return [s.to_entity(r) for r in rows]

    def update_field(self, record_id: Any, field_name: FieldName, new_value: Any) -> None:
        s = self._schema
        self._check_id(record_id)
        col = s.column(field_name)
        if col.name == s.id_column:
            raise ValidationError(f"{s.entity_label}.{s.id_column} cannot be changed")
        s.check_value(col, new_value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE {s.table} SET {col.name}={self._ph} WHERE {s.id_column}={self._ph}",
                (new_value, record_id),
            )
            affected = cur.rowcount
        if affected == 0:
            raise NotFoundError(f"{s.entity_label} with {s.id_column} {record_id} not found")
        logger.debug("Updated %s %s=%r field %s", s.entity_label, s.id_column, record_id, col.name)

    def delete(self, record_id: Any) -> None:
        s = self._schema
        self._check_id(record_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {s.table} WHERE {s.id_column}={self._ph}", (record_id,))
            affected = cur.rowcount
        if affected == 0:
            raise NotFoundError(f"{s.entity_label} with {s.id_column} {record_id} not found")
        logger.debug("Deleted %s %s=%r", s.entity_label, s.id_column, record_id)


def schema_columns(*columns: Sequence[Any]) -> Tuple[Column, ...]:
    """Build Column tuples from (name, attr, type) triples."""
    return tuple(
        Column(name=name.value if isinstance(name, Enum) else name, attr=attr, py_type=py_type)
        for name, attr, py_type in columns
    )
