from __future__ import annotations

from dataclasses import dataclass

from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.service import AuthService
from .core.enums import AccountClass
from .database.connection import DBConfig, DatabaseConnection
from .registrations.mysql_registration_repository import MySQLRegistrationRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    registrations_repo: MySQLRegistrationRepository
    attendee_accounts_repo: MySQLAccountRepository
    administrators_repo: MySQLAccountRepository

    auth_service: AuthService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_container_for(conn)


def build_container_for(conn: DatabaseConnection) -> Container:
    registrations_repo = MySQLRegistrationRepository(conn)
    attendee_accounts_repo = MySQLAccountRepository(conn, AccountClass.ATTENDEE)
    administrators_repo = MySQLAccountRepository(conn, AccountClass.ADMINISTRATOR)

    auth_service = AuthService(
        {
            AccountClass.ATTENDEE: attendee_accounts_repo,
            AccountClass.ADMINISTRATOR: administrators_repo,
        }
    )

    return Container(
        conn=conn,
        registrations_repo=registrations_repo,
        attendee_accounts_repo=attendee_accounts_repo,
        administrators_repo=administrators_repo,
        auth_service=auth_service,
    )
