"""
Entry store layer for outreach reporting.

Usage:
    from outreach_reporting.storage import get_store

    # Get store from configuration
    store = get_store()

    # Or explicitly specify backend
    store = get_store('sqlite', db_path='data/entries.db')

    # Use as context manager
    with get_store() as store:
        store.initialize()
        entries = store.list_entries()
"""

from .base import (
    EntryStore,
    QueryError,
    SchemaError,
    StorageConnectionError,
    StorageError,
)
from .factory import (
    get_store,
    is_store_available,
    list_available_stores,
    register_store,
)

__all__ = [
    # Base classes and exceptions
    "EntryStore",
    "StorageError",
    "StorageConnectionError",
    "QueryError",
    "SchemaError",
    # Factory functions
    "get_store",
    "register_store",
    "list_available_stores",
    "is_store_available",
]
