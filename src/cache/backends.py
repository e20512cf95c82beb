#!/usr/bin/env python3
"""
Storage substrates for the cache layer.

A substrate is a plain string-keyed key/value store:
- get(key) → str | None
- set(key, value)
- remove(key)
- keys() → list[str]

CacheStore owns expiry and serialization; substrates only hold strings.
"""

import logging
import os
import sqlite3
import time
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = os.path.expanduser("~/.gita/cache/storage.db")

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at REAL NOT NULL
);
"""


class KeyValueStore:
    """Interface for a synchronous string key/value substrate."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> List[str]:
        raise NotImplementedError

    def close(self) -> None:
        pass


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed substrate. Lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data)


class SQLiteKeyValueStore(KeyValueStore):
    """
    Persistent substrate in a single SQLite table.

    Errors from sqlite3 are not handled here; CacheStore decides what a
    storage failure means.
    """

    def __init__(self, db_path: str = None):
        if db_path is None:
            db_path = DEFAULT_DB_PATH

        self.db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        self.conn = sqlite3.connect(db_path, check_same_thread=False, timeout=10.0)
        try:
            self.conn.executescript(SCHEMA)
            self.conn.commit()
        except sqlite3.Error:
            self.conn.close()
            raise

        logger.info(f"SQLiteKeyValueStore opened at {db_path}")

    def get(self, key: str) -> Optional[str]:
        row = self.conn.execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self.conn.execute(
            "INSERT OR REPLACE INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)",
            (key, value, time.time()),
        )
        self.conn.commit()

    def remove(self, key: str) -> None:
        self.conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        self.conn.commit()

    def keys(self) -> List[str]:
        return [row[0] for row in self.conn.execute("SELECT key FROM kv_store")]

    def close(self) -> None:
        if self.conn:
            self.conn.close()
            self.conn = None
            logger.info("SQLiteKeyValueStore closed")
