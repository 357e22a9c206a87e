from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_DB_TIMEOUT_SECONDS


@dataclass
class DBConfig:
    path: str
    timeout: float = DEFAULT_DB_TIMEOUT_SECONDS


class DatabaseConnection:
    """Connection factory for the embedded SQLite store.

    Note: We create short-lived connections per operation (one active session,
    SQLite serializes writers itself).
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def path(self) -> str:
        return self._config.path

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.path != config.path:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._config.path, timeout=float(self._config.timeout))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn
