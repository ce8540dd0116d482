"""
Unit tests for the Entry record and its boundary validation.
"""

import pytest

from outreach_reporting.exceptions import EntryValidationError
from outreach_reporting.schemas.entries import (
    ENTRY_COLUMNS,
    Entry,
    get_create_entries_table_sql,
    normalize_channel_flag,
)


def _row(**overrides) -> dict:
    row = {
        "id": "abc-123",
        "recorded_by": "Ama Mensah",
        "zone": "Zone A",
        "occurred_at": "2024-06-01",
        "category": "won",
        "subject_name": "Kwame Appiah",
        "age": "25",
        "residence": "Madina",
        "phone_number": "0241234567",
        "on_channel": "yes",
        "created_at": "2024-06-01T10:00:00+00:00",
    }
    row.update(overrides)
    return row


class TestEntryFromRow:
    """Tests for Entry.from_row."""

    def test_valid_row(self):
        """A complete row becomes an Entry."""
        entry = Entry.from_row(_row())

        assert entry.id == "abc-123"
        assert entry.recorded_by == "Ama Mensah"
        assert entry.is_on_channel

    def test_optional_fields_may_be_missing(self):
        """Age and phone number are optional."""
        row = _row()
        del row["age"]
        del row["phone_number"]

        entry = Entry.from_row(row)

        assert entry.age is None
        assert entry.phone_number is None

    def test_numeric_age_kept_as_text(self):
        """Ages are stored raw; parsing happens in the reports."""
        assert Entry.from_row(_row(age=31)).age == "31"

    @pytest.mark.parametrize("field", ["recorded_by", "occurred_at", "category"])
    def test_missing_required_field(self, field):
        """Missing required fields are rejected with field context."""
        row = _row()
        del row[field]

        with pytest.raises(EntryValidationError) as exc_info:
            Entry.from_row(row)

        assert exc_info.value.field == field

    def test_blank_id_rejected(self):
        """Ids must not be blank."""
        with pytest.raises(EntryValidationError):
            Entry.from_row(_row(id="  "))

    def test_unparseable_date_is_not_a_validation_error(self):
        """Bad dates are tolerated at the boundary and handled by the reports."""
        assert Entry.from_row(_row(occurred_at="someday")).occurred_at == "someday"

    def test_round_trip_row(self):
        """to_row returns every column."""
        entry = Entry.from_row(_row())

        assert set(entry.to_row()) == set(ENTRY_COLUMNS)


class TestNormalizeChannelFlag:
    """Tests for normalize_channel_flag."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("yes", "yes"),
            ("Yes", "yes"),
            (" YES ", "yes"),
            (True, "yes"),
            (1, "yes"),
            ("no", "no"),
            (False, "no"),
            (0, "no"),
            (None, "no"),
            ("", "no"),
        ],
    )
    def test_boolean_like_values(self, value, expected):
        """Boolean-like values normalize to yes/no."""
        assert normalize_channel_flag(value) == expected

    def test_unknown_value_rejected(self):
        """Anything else is a validation error."""
        with pytest.raises(EntryValidationError):
            normalize_channel_flag("maybe")


def test_create_table_sql_includes_indexes():
    """DDL covers the table and its indexes."""
    statements = get_create_entries_table_sql()

    assert "CREATE TABLE IF NOT EXISTS outreach_entries" in statements[0]
    assert len(statements) > 1
