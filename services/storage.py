# services/storage.py
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)

CREDENTIAL_KEY = "ticketmaster_api_key"


class CredentialStore(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, value: str) -> None: ...


# ---------- SQLite key/value ----------

def _connect(path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


def _init_schema(conn: sqlite3.Connection) -> None:
    conn.execute("""
    CREATE TABLE IF NOT EXISTS kv (
        key   TEXT PRIMARY KEY,
        value TEXT
    )
    """)
    conn.commit()


class SqliteCredentialStore:
    """
    Keeps the API credential in a local SQLite file under a fixed key.
    No expiry, no encryption.
    """

    def __init__(self, path: Path | str, key: str = CREDENTIAL_KEY) -> None:
        self.path = Path(path)
        self.key = key
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with _connect(self.path) as conn:
            _init_schema(conn)

    def get(self) -> Optional[str]:
        with _connect(self.path) as conn:
            row = conn.execute(
                "SELECT value FROM kv WHERE key = ?", (self.key,)
            ).fetchone()
        if not row or not row["value"]:
            return None
        return row["value"]

    def set(self, value: str) -> None:
        with _connect(self.path) as conn:
            conn.execute("""
            INSERT INTO kv (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """, (self.key, value))
            conn.commit()
        logger.info("Saved credential under key %s", self.key)


class MemoryCredentialStore:
    """Process-local store, used for tests and throwaway sessions."""

    def __init__(self, value: Optional[str] = None) -> None:
        self._data: Dict[str, str] = {}
        if value:
            self._data[CREDENTIAL_KEY] = value

    def get(self) -> Optional[str]:
        return self._data.get(CREDENTIAL_KEY) or None

    def set(self, value: str) -> None:
        self._data[CREDENTIAL_KEY] = value


def open_credential_store(
    path: Path | str, seed: Optional[str] = None
) -> SqliteCredentialStore:
    """Open the store at `path`, writing `seed` only if nothing is saved yet."""
    store = SqliteCredentialStore(path)
    if seed and not store.get():
        store.set(seed)
    return store
