"""
Entry store factory.

Provides factory function to create the configured entry store.
"""

import logging
from pathlib import Path
from typing import Optional

from .base import EntryStore, StorageError

logger = logging.getLogger(__name__)

# Registry of available stores
_STORE_REGISTRY: dict[str, type[EntryStore]] = {}


def register_store(backend_type: str, store_class: type[EntryStore]) -> None:
    """
    Register an entry store class.

    Args:
        backend_type: Backend identifier (e.g., 'sqlite')
        store_class: Class implementing EntryStore interface
    """
    _STORE_REGISTRY[backend_type.lower()] = store_class
    logger.debug(f"Registered entry store: {backend_type}")


def get_store(
    backend_type: Optional[str] = None,
    **kwargs,
) -> EntryStore:
    """
    Get an entry store instance based on configuration.

    Args:
        backend_type: Backend type ('sqlite').
                      If None, loads from settings.
        **kwargs: Additional arguments passed to store constructor.
                  For SQLite: db_path

    Returns:
        EntryStore instance (call initialize() before use).

    Raises:
        StorageError: If backend type is not supported or creation fails.

    Examples:
        # Get store from settings
        store = get_store()

        # Explicitly request SQLite
        store = get_store('sqlite', db_path='data/entries.db')
    """
    if backend_type is None:
        from ..config.settings import get_settings

        backend_type = get_settings().storage_backend

    backend_type = backend_type.lower()

    if backend_type not in _STORE_REGISTRY:
        _load_store(backend_type)

    if backend_type not in _STORE_REGISTRY:
        available = list(_STORE_REGISTRY.keys()) if _STORE_REGISTRY else ["none"]
        raise StorageError(
            f"Unknown entry store: '{backend_type}'. "
            f"Available stores: {', '.join(available)}"
        )

    store_class = _STORE_REGISTRY[backend_type]

    if not kwargs:
        kwargs = _get_default_kwargs(backend_type)

    try:
        store = store_class(**kwargs)
        logger.info(f"Created {backend_type} entry store")
        return store
    except (TypeError, OSError) as e:
        raise StorageError(f"Failed to create {backend_type} store: {e}") from e


def _load_store(backend_type: str) -> None:
    """Lazy-load a store implementation."""
    if backend_type == "sqlite":
        from .sqlite_backend import SQLiteEntryStore

        register_store("sqlite", SQLiteEntryStore)


def _get_default_kwargs(backend_type: str) -> dict:
    """Get default constructor arguments from settings."""
    from ..config.settings import get_settings

    settings = get_settings()

    if backend_type == "sqlite":
        return {
            "db_path": Path(settings.sqlite_db_path),
        }
    return {}


def list_available_stores() -> list[str]:
    """List all registered store types."""
    for backend_type in ["sqlite"]:
        if backend_type not in _STORE_REGISTRY:
            _load_store(backend_type)

    return list(_STORE_REGISTRY.keys())


def is_store_available(backend_type: str) -> bool:
    """Check if a specific store type is available."""
    backend_type = backend_type.lower()

    if backend_type not in _STORE_REGISTRY:
        _load_store(backend_type)

    return backend_type in _STORE_REGISTRY
