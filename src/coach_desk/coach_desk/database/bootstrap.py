from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

from ..app_logger import get_logger
from ..core.constants import DEFAULT_COACH_ID, DEFAULT_DB_TIMEOUT_SECONDS
from ..core.exceptions import StorageError

log = get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS coaches (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    phone TEXT,
    specialization TEXT,
    business_name TEXT,
    created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS students (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    coach_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    email TEXT,
    phone TEXT,
    sport_or_subject TEXT,
    batch TEXT,
    enrollment_date DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    status TEXT NOT NULL DEFAULT 'active' CHECK (status IN ('active', 'inactive')),
    monthly_fee REAL NOT NULL DEFAULT 0 CHECK (monthly_fee >= 0),
    created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (coach_id) REFERENCES coaches(id)
);

CREATE TABLE IF NOT EXISTS attendance (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    student_id INTEGER NOT NULL,
    date DATE NOT NULL,
    status TEXT NOT NULL DEFAULT 'present' CHECK (status IN ('present', 'absent')),
    notes TEXT,
    created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (student_id) REFERENCES students(id) ON DELETE CASCADE,
    UNIQUE (student_id, date)
);

CREATE TABLE IF NOT EXISTS payments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    student_id INTEGER NOT NULL,
    amount REAL NOT NULL CHECK (amount >= 0),
    payment_date DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    payment_method TEXT,
    status TEXT NOT NULL DEFAULT 'completed' CHECK (status IN ('completed', 'pending')),
    month TEXT,
    notes TEXT,
    transaction_id TEXT,
    created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (student_id) REFERENCES students(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS payment_methods (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    coach_id INTEGER NOT NULL,
    method_type TEXT,
    provider TEXT,
    api_key TEXT,
    is_active INTEGER NOT NULL DEFAULT 1,
    created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (coach_id) REFERENCES coaches(id)
);

CREATE INDEX IF NOT EXISTS idx_students_coach ON students(coach_id, name);
CREATE INDEX IF NOT EXISTS idx_attendance_date ON attendance(date);
CREATE INDEX IF NOT EXISTS idx_payments_student ON payments(student_id, payment_date);
CREATE INDEX IF NOT EXISTS idx_payment_methods_coach ON payment_methods(coach_id, is_active);
"""


@dataclass(frozen=True)
class DBTarget:
    path: str
    timeout: float


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        path=str(db_config.get("path", "coach_management.db")),
        timeout=float(db_config.get("timeout", DEFAULT_DB_TIMEOUT_SECONDS)),
    )


def _connect(target: DBTarget) -> sqlite3.Connection:
    if target.path != ":memory:":
        Path(target.path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    try:
        conn = sqlite3.connect(target.path, timeout=target.timeout)
    except sqlite3.Error as e:
        raise StorageError(f"Cannot open database {target.path}: {e}") from e
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def initialize(db_config: dict) -> None:
    """Create every table and index if missing. Safe to run on each start."""
    target = _as_target(db_config)
    conn = _connect(target)
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
    except sqlite3.Error as e:
        raise StorageError(f"Schema initialization failed: {e}") from e
    finally:
        conn.close()
    log.info("schema ready at %s", target.path)


def ensure_default_coach(db_config: dict, *, coach_id: int = DEFAULT_COACH_ID) -> bool:
    """Seed the demo coach the single-coach app falls back to.

    Returns True when the row was inserted.
    """
    target = _as_target(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SELECT id FROM coaches WHERE id=?", (int(coach_id),))
        created = cur.fetchone() is None
        if created:
            cur.execute(
                """
                INSERT INTO coaches(id, name, email, phone, specialization, business_name)
                VALUES(?,?,?,?,?,?)
                """,
                (
                    int(coach_id),
                    "Demo Coach",
                    "coach@example.com",
                    "9876543210",
                    "Cricket",
                    "Elite Sports Academy",
                ),
            )
            log.info("seeded default coach id=%s", coach_id)
        conn.commit()
        return created
    except sqlite3.Error as e:
        conn.rollback()
        raise StorageError(f"Seeding default coach failed: {e}") from e
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    target = _as_target(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
