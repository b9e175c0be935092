from __future__ import annotations

from ..core.enums import AccountClass
from ..database.connection import DatabaseConnection
from ..database.record_store import MySQLRecordStore
from .model import Account
from .repository import AccountRepository
from .schema import ACCOUNT_SCHEMAS


class MySQLAccountRepository(AccountRepository):
    """Read-only account lookup; accounts are provisioned outside the core."""

    def __init__(self, conn_factory: DatabaseConnection, account_class: AccountClass):
        self._account_class = AccountClass(account_class)
        self._store: MySQLRecordStore[Account] = MySQLRecordStore(conn_factory, ACCOUNT_SCHEMAS[self._account_class])

    @property
    def account_class(self) -> AccountClass:
        return self._account_class

    def get_account(self, username: int) -> Account:
        return self._store.get_by_id(username)
