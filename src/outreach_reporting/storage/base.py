"""
Abstract base class for entry stores.

The reporting engine only consumes snapshots from a store; create and
delete exist for the intake and admin views that share the store.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..schemas.entries import Entry


class EntryStore(ABC):
    """
    Abstract base class for entry stores.

    All store implementations must implement this interface to ensure
    consistent behavior across backends.
    """

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Return the backend type identifier (e.g., 'sqlite')."""
        pass

    @abstractmethod
    def initialize(self) -> None:
        """
        Initialize the store.

        Creates tables and indexes if they don't exist.
        Should be idempotent - safe to call multiple times.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close connections and release resources."""
        pass

    @abstractmethod
    def create_entry(self, fields: dict[str, Any]) -> Entry:
        """
        Persist a new entry.

        Args:
            fields: Entry fields without ``id`` and ``created_at``,
                    which the store assigns.

        Returns:
            The stored Entry.

        Raises:
            EntryValidationError: If the fields do not form a valid entry.
            StorageError: If insertion fails.
        """
        pass

    @abstractmethod
    def insert_entries(self, entries: list[Entry]) -> int:
        """
        Bulk-insert entries that already carry their id and created_at.

        Args:
            entries: Complete Entry records (imports, seeding)

        Returns:
            Number of entries inserted.

        Raises:
            StorageError: If insertion fails.
        """
        pass

    @abstractmethod
    def list_entries(self) -> list[Entry]:
        """
        Return every stored entry, newest ``created_at`` first.

        No filtering is applied; the reporting engine filters itself.
        """
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> bool:
        """
        Delete an entry by id.

        Returns:
            True if a row was deleted, False if the id was unknown.
        """
        pass

    @abstractmethod
    def has_subject_name(self, subject_name: str) -> bool:
        """Case-insensitive check for an existing entry about the same person."""
        pass

    @abstractmethod
    def count_entries(self) -> int:
        """Return the number of stored entries."""
        pass

    def health_check(self) -> dict:
        """
        Perform a health check on the store.

        Returns:
            Dictionary with health status information:
            {
                "healthy": bool,
                "backend_type": str,
                "message": str,
                "details": dict
            }
        """
        try:
            count = self.count_entries()
            return {
                "healthy": True,
                "backend_type": self.backend_type,
                "message": "Store is operational",
                "details": {"entry_count": count},
            }
        except StorageError as e:
            return {
                "healthy": False,
                "backend_type": self.backend_type,
                "message": f"Health check failed: {str(e)}",
                "details": {"error": str(e)},
            }

    def __enter__(self) -> "EntryStore":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - ensures resources are released."""
        self.close()


class StorageError(Exception):
    """Base exception for entry store errors."""

    pass


class StorageConnectionError(StorageError):
    """Raised when connection to the store fails."""

    pass


class QueryError(StorageError):
    """Raised when a query fails to execute."""

    pass


class SchemaError(StorageError):
    """Raised when there's a schema-related error."""

    pass
