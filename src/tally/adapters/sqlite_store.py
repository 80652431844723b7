"""SQLite entry storage adapter."""

import logging
import sqlite3
from contextlib import closing
from datetime import datetime
from pathlib import Path

from tally.core.entries import Entry, Priority

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the entry database cannot be read or written."""


class SqliteEntryRepository:
    """
    SQLite-backed entry storage.

    Implements EntryRepository protocol. Ids come from AUTOINCREMENT so
    they are never reused. Each call opens its own connection.
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        try:
            with closing(self._connect()) as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS todos (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        date TEXT NOT NULL,
                        text TEXT NOT NULL,
                        priority TEXT NOT NULL DEFAULT 'normal'
                    )
                    """
                )
                cols = {row["name"] for row in conn.execute("PRAGMA table_info(todos)")}
                if "priority" not in cols:
                    conn.execute(
                        "ALTER TABLE todos ADD COLUMN priority TEXT NOT NULL DEFAULT 'normal'"
                    )
                    logger.info(f"Migrated {self.db_path}: added column priority")
                conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open database {self.db_path}: {e}") from e

    def fetch_all(self) -> list[Entry]:
        """Fetch every stored entry in id order."""
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute("SELECT id, date, text, priority FROM todos ORDER BY id").fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Cannot read entries from {self.db_path}: {e}") from e

        entries = []
        for row in rows:
            try:
                entries.append(
                    Entry.from_record(
                        {
                            "id": row["id"],
                            "description": row["text"],
                            "priority": row["priority"],
                            "created_at": row["date"],
                        }
                    )
                )
            except ValueError as e:
                raise StoreError(f"Corrupt entry #{row['id']} in {self.db_path}: {e}") from e
        return entries

    def insert(self, description: str, priority: Priority, created_at: datetime) -> int:
        """Insert a new entry and return its id."""
        try:
            with closing(self._connect()) as conn:
                cur = conn.execute(
                    "INSERT INTO todos (date, text, priority) VALUES (?, ?, ?)",
                    (created_at.isoformat(), description, priority.label),
                )
                conn.commit()
                entry_id = cur.lastrowid
        except sqlite3.Error as e:
            raise StoreError(f"Cannot write entry to {self.db_path}: {e}") from e

        if entry_id is None:
            raise StoreError("SQLite did not return an id for the new entry")
        logger.debug(f"Inserted entry #{entry_id} priority={priority.label}")
        return int(entry_id)
