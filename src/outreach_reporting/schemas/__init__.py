"""Schemas for outreach entry storage."""

from .entries import (
    ENTRIES_SQLITE_SCHEMA,
    ENTRY_COLUMNS,
    Entry,
    get_create_entries_table_sql,
    normalize_channel_flag,
)

__all__ = [
    "Entry",
    "ENTRY_COLUMNS",
    "ENTRIES_SQLITE_SCHEMA",
    "get_create_entries_table_sql",
    "normalize_channel_flag",
]
