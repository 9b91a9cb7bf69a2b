"""SQLite key-value storage for alertdesk."""

import asyncio
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from alertdesk.storage.base import BaseStorage


class SQLiteStorage(BaseStorage):
    """Key-value storage kept in a single SQLite table.

    Each call opens its own connection and runs in a worker thread, so
    the event loop is never blocked on disk I/O.
    """

    TABLE = "kv"

    def __init__(self, db_path: Path):
        """Initialize the storage.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Create the key-value table on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.TABLE} (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    # ==================== Sync primitives ====================

    def get_sync(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"SELECT value FROM {self.TABLE} WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set_sync(self, key: str, value: str) -> None:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"""
                INSERT OR REPLACE INTO {self.TABLE} (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, datetime.now(timezone.utc).isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def remove_sync(self, key: str) -> None:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"DELETE FROM {self.TABLE} WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    # ==================== Async interface ====================

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self.get_sync, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self.set_sync, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self.remove_sync, key)
