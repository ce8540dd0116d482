"""
Shared fixtures for integration tests.

Provides:
- Temporary SQLite database for isolated testing
- Sample entry fixtures
- Report query fixtures
"""

import random
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

from outreach_reporting.config.constants import CATEGORIES
from outreach_reporting.config.settings import ReportingSettings
from outreach_reporting.reporting import ReportQueries
from outreach_reporting.schemas.entries import Entry
from outreach_reporting.storage import get_store

# Fixed reference instant so window filtering is deterministic
REFERENCE_NOW = datetime(2024, 6, 30, 12, 0, 0)

# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


def generate_sample_entries(
    num_entries: int = 50,
    end_date: date = None,
    span_days: int = 20,
    seed: int = 42,
) -> list[Entry]:
    """
    Generate sample outreach entries for testing.

    Args:
        num_entries: Number of entries to generate
        end_date: Latest occurrence date (default: day before REFERENCE_NOW)
        span_days: Occurrence dates fall within this many days of end_date
        seed: Random seed for reproducibility (default: 42)

    Returns:
        List of Entry objects with distinct ids and created_at values
    """
    rng = random.Random(seed)

    if end_date is None:
        end_date = REFERENCE_NOW.date() - timedelta(days=1)

    recorders = ["Ama Mensah", "Kofi Boateng", "Esi Owusu", "Yaw Darko"]
    zones = ["Zone A", "Zone B", "Zone C"]
    residences = ["Madina", "Osu", "Legon", "Tema", "Adenta"]

    entries = []
    for i in range(num_entries):
        occurred = end_date - timedelta(days=rng.randint(0, span_days - 1))
        entries.append(
            Entry(
                id=f"sample-{i:04d}",
                recorded_by=rng.choice(recorders),
                zone=rng.choice(zones),
                occurred_at=occurred.isoformat(),
                category=rng.choice(CATEGORIES),
                subject_name=f"Sample Subject {i}",
                residence=rng.choice(residences),
                on_channel=rng.choice(["yes", "no"]),
                created_at=(
                    datetime(2024, 1, 1) + timedelta(minutes=i)
                ).isoformat(),
                age=str(rng.randint(8, 70)),
                phone_number=f"024{rng.randint(1000000, 9999999)}",
            )
        )
    return entries


@pytest.fixture
def reference_now() -> datetime:
    """Reference instant for windowed reports."""
    return REFERENCE_NOW


@pytest.fixture
def sample_entries() -> list[Entry]:
    """Generate 50 sample entries for testing."""
    return generate_sample_entries(num_entries=50)


@pytest.fixture
def new_entry_fields() -> dict:
    """Form fields for a single new entry."""
    return {
        "recorded_by": "Ama Mensah",
        "zone": "Zone A",
        "occurred_at": "2024-06-20",
        "category": "won",
        "subject_name": "Kwame Appiah",
        "age": "24",
        "residence": "Madina",
        "phone_number": "0241234567",
        "on_channel": "yes",
    }


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test_outreach_entries.db"


@pytest.fixture
def sqlite_store(temp_db_path: Path):
    """
    Create an initialized SQLite entry store with temporary database.

    Automatically cleans up after test.
    """
    store = get_store("sqlite", db_path=temp_db_path)
    store.initialize()
    yield store
    store.close()


@pytest.fixture
def sqlite_store_with_data(sqlite_store, sample_entries):
    """
    SQLite store pre-populated with sample entries.

    Returns tuple of (store, entries_inserted).
    """
    rows = sqlite_store.insert_entries(sample_entries)
    return sqlite_store, rows


# =============================================================================
# REPORTING FIXTURES
# =============================================================================


@pytest.fixture
def report_queries(sqlite_store_with_data):
    """ReportQueries over the populated store, with default limits."""
    store, _ = sqlite_store_with_data
    queries = ReportQueries(store=store, settings=ReportingSettings())
    queries.initialize()
    yield queries
    queries.close()
