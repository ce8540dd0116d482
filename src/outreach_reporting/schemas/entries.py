"""
Outreach entry schema.

An entry records one outreach encounter: who recorded it, when it
happened, the outcome category, and attributes of the person reached.
Rows are validated once here, at the Entry Store boundary; the reporting
engine trusts the shape and only tolerates unparseable date/age values.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..config.constants import CHANNEL_NO, CHANNEL_YES, TABLE_ENTRIES
from ..exceptions import EntryValidationError

# =============================================================================
# Entry Record
# =============================================================================

# Text fields every stored row must carry
REQUIRED_FIELDS = (
    "id",
    "recorded_by",
    "zone",
    "occurred_at",
    "category",
    "subject_name",
    "residence",
    "on_channel",
    "created_at",
)

OPTIONAL_FIELDS = ("age", "phone_number")

ENTRY_COLUMNS = REQUIRED_FIELDS + OPTIONAL_FIELDS

_TRUTHY_CHANNEL_VALUES = frozenset(["yes", "y", "true", "1"])
_FALSY_CHANNEL_VALUES = frozenset(["no", "n", "false", "0", ""])


def normalize_channel_flag(value: Any) -> str:
    """
    Normalize a boolean-like channel flag to "yes" or "no".

    Args:
        value: Raw flag (bool, int, or yes/no style string)

    Returns:
        "yes" or "no"

    Raises:
        EntryValidationError: If the value is not boolean-like
    """
    if isinstance(value, bool):
        return CHANNEL_YES if value else CHANNEL_NO
    if value is None:
        return CHANNEL_NO

    text = str(value).strip().lower()
    if text in _TRUTHY_CHANNEL_VALUES:
        return CHANNEL_YES
    if text in _FALSY_CHANNEL_VALUES:
        return CHANNEL_NO
    raise EntryValidationError(
        "Channel flag must be yes/no", field="on_channel", value=value
    )


@dataclass(frozen=True)
class Entry:
    """A single outreach entry as supplied by the Entry Store."""

    id: str
    recorded_by: str
    zone: str
    occurred_at: str
    category: str
    subject_name: str
    residence: str
    on_channel: str
    created_at: str
    age: Optional[str] = None
    phone_number: Optional[str] = None

    @property
    def is_on_channel(self) -> bool:
        """Whether the subject is reachable on the messaging channel."""
        return self.on_channel == CHANNEL_YES

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Entry":
        """
        Build an Entry from a stored row, validating its shape.

        Args:
            row: Mapping with the ENTRY_COLUMNS keys

        Returns:
            Validated Entry

        Raises:
            EntryValidationError: If a required field is missing or blank
        """
        for name in REQUIRED_FIELDS:
            if name == "on_channel":
                continue
            if row.get(name) is None:
                raise EntryValidationError("Missing required field", field=name)

        entry_id = str(row["id"]).strip()
        if not entry_id:
            raise EntryValidationError("Entry id must not be blank", field="id")

        age = row.get("age")
        phone_number = row.get("phone_number")

        return cls(
            id=entry_id,
            recorded_by=str(row["recorded_by"]),
            zone=str(row["zone"]),
            occurred_at=str(row["occurred_at"]),
            category=str(row["category"]),
            subject_name=str(row["subject_name"]),
            residence=str(row["residence"]),
            on_channel=normalize_channel_flag(row.get("on_channel")),
            created_at=str(row["created_at"]),
            age=None if age is None else str(age),
            phone_number=None if phone_number is None else str(phone_number),
        )

    def to_row(self) -> dict[str, Any]:
        """Convert to a storage row dictionary."""
        return asdict(self)


# =============================================================================
# SQLite Schema
# =============================================================================

ENTRIES_SQLITE_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {TABLE_ENTRIES} (
    id TEXT PRIMARY KEY,
    recorded_by TEXT NOT NULL,
    zone TEXT NOT NULL,
    occurred_at TEXT NOT NULL,
    category TEXT NOT NULL,
    subject_name TEXT NOT NULL,
    age TEXT,
    residence TEXT NOT NULL,
    phone_number TEXT,
    on_channel TEXT NOT NULL,
    created_at TEXT NOT NULL
)
"""

ENTRIES_INDEXES = [
    f"CREATE INDEX IF NOT EXISTS idx_entries_created_at ON {TABLE_ENTRIES}(created_at)",
    f"CREATE INDEX IF NOT EXISTS idx_entries_occurred_at ON {TABLE_ENTRIES}(occurred_at)",
    f"CREATE INDEX IF NOT EXISTS idx_entries_subject_name ON {TABLE_ENTRIES}(subject_name)",
]


def get_create_entries_table_sql() -> list[str]:
    """Return the DDL statements that create the entries table and indexes."""
    return [ENTRIES_SQLITE_SCHEMA, *ENTRIES_INDEXES]
