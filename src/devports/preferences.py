"""Preference storage and the hidden port list."""

import json
import sqlite3
import threading
from pathlib import Path
from typing import Protocol

from .config import HIDDEN_PORTS_KEY, get_db_path
from .console import debug
from .discovery import PortRecord


class PreferenceStore(Protocol):
    """Minimal key-value store for user preferences."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class SQLitePreferenceStore:
    """SQLite-backed preference store."""

    _lock = threading.Lock()

    def __init__(self, db_path: Path | None = None) -> None:
        """Initialize database connection.

        Args:
            db_path: Path to the SQLite database file. If None, uses default location.
        """
        self.db_path = db_path or get_db_path()
        self.db_path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
        self._init_schema()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema if not exists."""
        with self._lock, self._get_connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT DEFAULT (datetime('now'))
                )
                """
            )
            conn.commit()

    def get(self, key: str) -> str | None:
        """Get a stored value.

        Args:
            key: Preference key

        Returns:
            Stored string or None if not set
        """
        with self._lock, self._get_connection() as conn:
            cursor = conn.execute("SELECT value FROM preferences WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        """Set or replace a stored value.

        Args:
            key: Preference key
            value: String value
        """
        with self._lock, self._get_connection() as conn:
            conn.execute(
                """
                INSERT INTO preferences (key, value)
                VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = datetime('now')
                """,
                (key, value),
            )
            conn.commit()


class MemoryPreferenceStore:
    """In-memory preference store."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class HiddenPorts:
    """Ports the user chose not to see, persisted across discovery cycles.

    Each change reads the stored list, computes the new list and writes it
    back. Hidden ports without a listener stay stored until unhidden.
    """

    def __init__(self, store: PreferenceStore) -> None:
        """Initialize hidden port list.

        Args:
            store: Preference store holding the serialized list
        """
        self.store = store

    def load(self) -> list[int]:
        """Load hidden ports.

        Returns:
            Hidden ports in the order they were hidden (empty if unset or unreadable)
        """
        raw = self.store.get(HIDDEN_PORTS_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            debug(f"Ignoring unreadable {HIDDEN_PORTS_KEY} value: {raw!r}")
            return []
        if not isinstance(data, list):
            return []
        return [p for p in data if isinstance(p, int) and not isinstance(p, bool)]

    def hide(self, port: int) -> bool:
        """Hide a port.

        Returns:
            True if hidden, False if it was already hidden
        """
        current = self.load()
        if port in current:
            return False
        self._save([*current, port])
        return True

    def unhide(self, port: int) -> bool:
        """Unhide a port.

        Returns:
            True if removed, False if it was not hidden
        """
        current = self.load()
        if port not in current:
            return False
        self._save([p for p in current if p != port])
        return True

    def partition(
        self, records: list[PortRecord]
    ) -> tuple[list[PortRecord], list[PortRecord]]:
        """Split records into (visible, hidden)."""
        hidden = set(self.load())
        visible = [record for record in records if record.port not in hidden]
        hidden_records = [record for record in records if record.port in hidden]
        return visible, hidden_records

    def _save(self, ports: list[int]) -> None:
        self.store.set(HIDDEN_PORTS_KEY, json.dumps(ports))
