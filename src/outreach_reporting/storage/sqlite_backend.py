"""
SQLite entry store implementation.

Local storage for outreach entries, used by the intake form, the admin
list and the reporting queries.
"""

import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from ..config.constants import DEFAULT_SQLITE_DB_PATH, TABLE_ENTRIES
from ..exceptions import EntryValidationError
from ..schemas.entries import ENTRY_COLUMNS, Entry, get_create_entries_table_sql
from .base import EntryStore, QueryError, SchemaError, StorageConnectionError

logger = logging.getLogger(__name__)


class SQLiteEntryStore(EntryStore):
    """SQLite-backed entry store."""

    def __init__(
        self,
        db_path: Path | str = DEFAULT_SQLITE_DB_PATH,
        *,
        check_same_thread: bool = False,
        timeout: float = 30.0,
    ):
        """
        Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
            check_same_thread: SQLite check_same_thread parameter
            timeout: Connection timeout in seconds
        """
        self.db_path = Path(db_path)
        self._check_same_thread = check_same_thread
        self._timeout = timeout
        self._connection: Optional[sqlite3.Connection] = None

        # Ensure parent directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def backend_type(self) -> str:
        """Return backend type identifier."""
        return "sqlite"

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            try:
                self._connection = sqlite3.connect(
                    str(self.db_path),
                    check_same_thread=self._check_same_thread,
                    timeout=self._timeout,
                )
                self._connection.row_factory = sqlite3.Row
                logger.debug(f"Connected to SQLite database: {self.db_path}")
            except sqlite3.Error as e:
                raise StorageConnectionError(
                    f"Failed to connect to SQLite database: {e}"
                ) from e
        return self._connection

    @contextmanager
    def _cursor(self):
        """Context manager for database cursor with automatic commit/rollback."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise QueryError(f"SQLite query failed: {e}") from e
        finally:
            cursor.close()

    def initialize(self) -> None:
        """
        Create the entries table and indexes.

        Safe to call multiple times - uses IF NOT EXISTS.
        """
        logger.info(f"Initializing SQLite entry store: {self.db_path}")

        try:
            with self._cursor() as cursor:
                for statement in get_create_entries_table_sql():
                    cursor.execute(statement)
        except QueryError as e:
            raise SchemaError(f"Failed to create {TABLE_ENTRIES}: {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug("SQLite connection closed")

    def create_entry(self, fields: dict[str, Any]) -> Entry:
        """
        Insert a new entry, assigning its id and creation timestamp.

        Args:
            fields: Entry fields (``id``/``created_at`` are ignored if given)

        Returns:
            The stored Entry
        """
        row = {name: fields.get(name) for name in ENTRY_COLUMNS}
        row["id"] = str(uuid.uuid4())
        row["created_at"] = datetime.now().astimezone().isoformat()

        # Validate before touching the database
        entry = Entry.from_row(row)

        columns = ", ".join(ENTRY_COLUMNS)
        placeholders = ", ".join(f":{name}" for name in ENTRY_COLUMNS)
        sql = f"INSERT INTO {TABLE_ENTRIES} ({columns}) VALUES ({placeholders})"

        with self._cursor() as cursor:
            cursor.execute(sql, entry.to_row())

        logger.info(f"Created entry {entry.id} recorded by {entry.recorded_by!r}")
        return entry

    def insert_entries(self, entries: list[Entry]) -> int:
        """
        Insert already-built entries (bulk loads and fixtures).

        Args:
            entries: Entries with their ids and creation timestamps set

        Returns:
            Number of entries inserted
        """
        if not entries:
            return 0

        columns = ", ".join(ENTRY_COLUMNS)
        placeholders = ", ".join(f":{name}" for name in ENTRY_COLUMNS)
        sql = f"INSERT INTO {TABLE_ENTRIES} ({columns}) VALUES ({placeholders})"

        with self._cursor() as cursor:
            cursor.executemany(sql, [entry.to_row() for entry in entries])
            # executemany may not set rowcount correctly; use len instead
            return len(entries)

    def list_entries(self) -> list[Entry]:
        """Return all entries, newest first; invalid rows are logged and skipped."""
        sql = f"SELECT * FROM {TABLE_ENTRIES} ORDER BY created_at DESC"

        with self._cursor() as cursor:
            cursor.execute(sql)
            rows = cursor.fetchall()

        entries = []
        skipped = 0
        for row in rows:
            try:
                entries.append(Entry.from_row(dict(row)))
            except EntryValidationError as e:
                skipped += 1
                logger.warning(f"Skipping invalid stored entry: {e}")

        if skipped:
            logger.warning(f"Skipped {skipped} invalid rows in {TABLE_ENTRIES}")
        return entries

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry by id."""
        sql = f"DELETE FROM {TABLE_ENTRIES} WHERE id = :id"

        with self._cursor() as cursor:
            cursor.execute(sql, {"id": entry_id})
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Deleted entry {entry_id}")
        return deleted

    def has_subject_name(self, subject_name: str) -> bool:
        """Case-insensitive match on subject_name (ASCII case folding)."""
        sql = f"""
            SELECT 1 FROM {TABLE_ENTRIES}
            WHERE subject_name = :name COLLATE NOCASE
            LIMIT 1
        """

        with self._cursor() as cursor:
            cursor.execute(sql, {"name": subject_name})
            return cursor.fetchone() is not None

    def count_entries(self) -> int:
        """Return the number of stored entries."""
        with self._cursor() as cursor:
            cursor.execute(f"SELECT COUNT(*) FROM {TABLE_ENTRIES}")
            return cursor.fetchone()[0]
