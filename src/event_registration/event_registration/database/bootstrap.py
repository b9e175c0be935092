from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector

from ..accounts.passwords import hash_password, new_salt
from ..accounts.schema import ACCOUNT_SCHEMAS
from ..core.enums import AccountClass
from .connection import DBConfig

logger = logging.getLogger(__name__)

# Demo logins for development databases only.
DEMO_ACCOUNTS = (
    (AccountClass.ATTENDEE, 1001, "attendee123"),
    (AccountClass.ADMINISTRATOR, 1, "admin123"),
)


def _connect(db_config: dict, *, with_database: bool = True):
    target = DBConfig.from_dict(db_config)
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    return re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a SQL script on ';' outside of quoted strings."""
    buf: list[str] = []
    quote: Optional[str] = None
    chars = iter(sql)

    for ch in chars:
        if ch == "\\":
            buf.append(ch)
            buf.append(next(chars, ""))
        elif quote:
            buf.append(ch)
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
            buf.append(ch)
        elif ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
        else:
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_script(db_config: dict, sql: str) -> int:
    conn = _connect(db_config)
    count = 0
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(db_config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    count = _run_script(db_config, sql)
    logger.info("Applied schema %s (%d statements)", schema_path, count)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    sql = _strip_create_db_and_use(Path(seed_path).read_text(encoding="utf-8"))
    count = _run_script(db_config, sql)
    logger.info("Applied seed %s (%d statements)", seed_path, count)


def ensure_demo_accounts(db_config: dict) -> None:
    """Upsert the demo attendee/administrator with a fresh salt each run."""
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        for account_class, username, password in DEMO_ACCOUNTS:
            table = ACCOUNT_SCHEMAS[account_class].table
            salt = new_salt()
            cur.execute(
                f"""
                INSERT INTO {table} (Username, PasswordHash, Salt)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE PasswordHash=VALUES(PasswordHash), Salt=VALUES(Salt)
                """,
                (username, hash_password(password, salt), salt),
            )
            logger.info("Demo %s account %s ready", account_class.value, username)
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
