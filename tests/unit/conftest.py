"""
Pytest configuration and shared fixtures for unit tests.
"""

import itertools
from datetime import datetime

import pytest

from outreach_reporting.schemas.entries import Entry

# Fixed reference instant so window tests do not depend on the wall clock
REFERENCE_NOW = datetime(2024, 6, 30, 12, 0, 0)


@pytest.fixture
def reference_now() -> datetime:
    """Reference 'current time' used by window and report tests."""
    return REFERENCE_NOW


@pytest.fixture
def make_entry():
    """
    Factory fixture building Entry objects with sensible defaults.

    Usage:
        entry = make_entry(category="won", occurred_at="2024-06-01")
    """
    counter = itertools.count(1)

    def _make_entry(**overrides) -> Entry:
        n = next(counter)
        fields = {
            "id": f"entry-{n}",
            "recorded_by": "Ama Mensah",
            "zone": "Zone A",
            "occurred_at": "2024-06-15",
            "category": "won",
            "subject_name": f"Subject {n}",
            "residence": "Madina",
            "on_channel": "yes",
            "created_at": "2024-06-15T10:00:00+00:00",
            "age": "25",
            "phone_number": "0241234567",
        }
        fields.update(overrides)
        return Entry(**fields)

    return _make_entry
