"""
Integration tests for the SQLite entry store.

Tests:
- Database initialization and table creation
- Entry creation, listing order and deletion
- Duplicate subject name lookup
- Skipping of invalid stored rows
- Store factory and health check
"""

import sqlite3

import pytest

from outreach_reporting.config.constants import TABLE_ENTRIES
from outreach_reporting.exceptions import EntryValidationError
from outreach_reporting.storage import (
    EntryStore,
    SchemaError,
    StorageError,
    get_store,
    is_store_available,
    list_available_stores,
)


class TestSQLiteStoreInitialization:
    """Tests for store initialization."""

    def test_store_creates_database(self, sqlite_store, temp_db_path):
        """Store should create the database file."""
        assert temp_db_path.exists()

    def test_initialize_is_idempotent(self, sqlite_store):
        """Calling initialize twice keeps existing rows."""
        sqlite_store.create_entry(
            {
                "recorded_by": "Ama",
                "zone": "Zone A",
                "occurred_at": "2024-06-01",
                "category": "won",
                "subject_name": "Kwame",
                "residence": "Madina",
                "on_channel": "no",
            }
        )
        sqlite_store.initialize()

        assert sqlite_store.count_entries() == 1

    def test_backend_type_is_sqlite(self, sqlite_store):
        """Store type should be sqlite."""
        assert sqlite_store.backend_type == "sqlite"


class TestCreateEntry:
    """Tests for create_entry."""

    def test_assigns_id_and_created_at(self, sqlite_store, new_entry_fields):
        """The store assigns the id and creation time."""
        entry = sqlite_store.create_entry(
            {**new_entry_fields, "id": "caller-id", "created_at": "yesterday"}
        )

        assert entry.id != "caller-id"
        assert entry.created_at != "yesterday"
        assert sqlite_store.list_entries() == [entry]

    def test_normalizes_channel_flag(self, sqlite_store, new_entry_fields):
        """Boolean channel flags are stored as yes/no."""
        entry = sqlite_store.create_entry({**new_entry_fields, "on_channel": True})

        assert entry.on_channel == "yes"

    def test_optional_fields(self, sqlite_store, new_entry_fields):
        """Age and phone number may be omitted."""
        fields = dict(new_entry_fields)
        del fields["age"]
        del fields["phone_number"]

        entry = sqlite_store.create_entry(fields)

        assert entry.age is None
        assert sqlite_store.list_entries()[0].phone_number is None

    def test_missing_required_field_rejected(self, sqlite_store, new_entry_fields):
        """Incomplete entries never reach the table."""
        fields = dict(new_entry_fields)
        del fields["zone"]

        with pytest.raises(EntryValidationError):
            sqlite_store.create_entry(fields)

        assert sqlite_store.count_entries() == 0


class TestInsertEntries:
    """Tests for insert_entries."""

    def test_bulk_insert_keeps_ids(self, sqlite_store, sample_entries):
        """Bulk inserts store entries with their own ids."""
        assert isinstance(sqlite_store, EntryStore)

        inserted = sqlite_store.insert_entries(sample_entries[:5])

        assert inserted == 5
        assert {e.id for e in sqlite_store.list_entries()} == {
            e.id for e in sample_entries[:5]
        }

    def test_empty_insert(self, sqlite_store):
        """Inserting nothing is a no-op."""
        assert sqlite_store.insert_entries([]) == 0
        assert sqlite_store.count_entries() == 0


class TestListEntries:
    """Tests for list_entries."""

    def test_newest_first(self, sqlite_store_with_data):
        """Entries are listed by created_at, newest first."""
        store, rows = sqlite_store_with_data

        entries = store.list_entries()

        assert len(entries) == rows
        created = [e.created_at for e in entries]
        assert created == sorted(created, reverse=True)

    def test_invalid_rows_skipped(self, sqlite_store_with_data, temp_db_path):
        """Rows that fail validation are logged and skipped."""
        store, rows = sqlite_store_with_data

        conn = sqlite3.connect(str(temp_db_path))
        conn.execute(
            f"""
            INSERT INTO {TABLE_ENTRIES}
                (id, recorded_by, zone, occurred_at, category, subject_name,
                 residence, on_channel, created_at)
            VALUES ('bad', 'Ama', 'Zone A', '2024-06-01', 'won', 'X',
                    'Osu', 'maybe', '2024-06-01T00:00:00')
            """
        )
        conn.commit()
        conn.close()

        entries = store.list_entries()

        assert len(entries) == rows
        assert "bad" not in {e.id for e in entries}
        assert store.count_entries() == rows + 1


class TestDeleteEntry:
    """Tests for delete_entry."""

    def test_delete_existing(self, sqlite_store_with_data, sample_entries):
        """Deleting an entry removes it from listings."""
        store, rows = sqlite_store_with_data

        assert store.delete_entry(sample_entries[0].id) is True
        assert store.count_entries() == rows - 1
        assert sample_entries[0].id not in {e.id for e in store.list_entries()}

    def test_delete_missing(self, sqlite_store):
        """Deleting an unknown id reports False."""
        assert sqlite_store.delete_entry("does-not-exist") is False


class TestHasSubjectName:
    """Tests for has_subject_name."""

    def test_case_insensitive(self, sqlite_store, new_entry_fields):
        """Names match regardless of case."""
        sqlite_store.create_entry(new_entry_fields)

        assert sqlite_store.has_subject_name("kwame appiah")
        assert sqlite_store.has_subject_name("KWAME APPIAH")
        assert not sqlite_store.has_subject_name("Kwame")


class TestStoreFactory:
    """Tests for the store registry and health check."""

    def test_sqlite_available(self):
        """SQLite is always registered."""
        assert is_store_available("sqlite")
        assert "sqlite" in list_available_stores()

    def test_unknown_store(self):
        """Unknown store types raise StorageError."""
        with pytest.raises(StorageError):
            get_store("postgres")

    def test_health_check(self, sqlite_store_with_data):
        """A populated store reports healthy with its entry count."""
        store, rows = sqlite_store_with_data

        health = store.health_check()

        assert health["healthy"] is True
        assert health["details"]["entry_count"] == rows

    def test_health_check_uninitialized(self, temp_db_path):
        """A store without its table reports unhealthy."""
        with get_store("sqlite", db_path=temp_db_path) as store:
            health = store.health_check()

        assert health["healthy"] is False

    def test_schema_conflict_raises_schema_error(self, temp_db_path):
        """A conflicting object under the table name fails initialization."""
        conn = sqlite3.connect(str(temp_db_path))
        conn.execute(f"CREATE VIEW {TABLE_ENTRIES} AS SELECT 1 AS id")
        conn.commit()
        conn.close()

        with get_store("sqlite", db_path=temp_db_path) as store:
            with pytest.raises(SchemaError):
                store.initialize()
