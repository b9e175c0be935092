from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.record_store import MySQLRecordStore
from .model import Registration
from .repository import RegistrationRepository
from .schema import REGISTRATION_SCHEMA


class MySQLRegistrationRepository(MySQLRecordStore[Registration], RegistrationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, REGISTRATION_SCHEMA)
