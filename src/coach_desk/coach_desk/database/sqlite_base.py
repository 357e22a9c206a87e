from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..core.exceptions import ConstraintViolationError, StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """One connection, one transaction: commit on success, rollback on error.

    sqlite3 errors leave this block as domain exceptions so callers never
    depend on the driver.
    """
    try:
        conn = conn_factory.connect()
    except sqlite3.Error as e:
        raise StorageError(f"Cannot open database: {e}") from e
    try:
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except sqlite3.IntegrityError as e:
        conn.rollback()
        raise ConstraintViolationError(str(e)) from e
    except sqlite3.Error as e:
        conn.rollback()
        raise StorageError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]
