from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Open a connection + cursor, commit on success, roll back on failure.

    Driver errors are re-raised as StorageError; nothing is retried.
    """

    driver_errors = conn_factory.driver_errors
    try:
        conn = conn_factory.connect()
    except driver_errors as exc:
        logger.error("Cannot connect to database: %s", exc)
        raise StorageError(f"Cannot connect to database: {exc}") from exc

    try:
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except driver_errors as exc:
        _rollback_quietly(conn, driver_errors)
        logger.error("Database error: %s", exc)
        raise StorageError(f"Database error: {exc}") from exc
    except Exception:
        _rollback_quietly(conn, driver_errors)
        raise
    finally:
        conn.close()


def _rollback_quietly(conn, driver_errors) -> None:
    # The original error is the one worth surfacing.
    try:
        conn.rollback()
    except driver_errors as exc:
        logger.warning("Rollback failed: %s", exc)


def _as_dict(cur, row) -> Dict[str, Any]:
    columns = [d[0] for d in cur.description]
    return dict(zip(columns, row))


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return _as_dict(cur, row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [_as_dict(cur, r) for r in rows or []]
