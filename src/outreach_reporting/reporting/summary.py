"""
Scalar summary statistics over a windowed entry set.
"""

from dataclasses import dataclass
from typing import Sequence

from ..config.constants import (
    CATEGORY_ENCOURAGED,
    CATEGORY_INVITED,
    CATEGORY_RECOMMITTED,
    CATEGORY_WON,
)
from ..schemas.entries import Entry
from .breakdowns import count_categories
from .parsing import parse_age


@dataclass(frozen=True)
class WindowedStats:
    """Counts and averages for the entries inside a reporting window."""

    total_entries: int = 0
    won: int = 0
    recommitted: int = 0
    encouraged: int = 0
    invited: int = 0
    on_channel: int = 0
    unique_residences: int = 0
    unique_recorders: int = 0
    unique_zones: int = 0
    average_age: int = 0

    @property
    def category_counts(self) -> dict[str, int]:
        """Per-category counts over the fixed vocabulary, zeros included."""
        return {
            CATEGORY_WON: self.won,
            CATEGORY_RECOMMITTED: self.recommitted,
            CATEGORY_ENCOURAGED: self.encouraged,
            CATEGORY_INVITED: self.invited,
        }

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_entries": self.total_entries,
            "won": self.won,
            "recommitted": self.recommitted,
            "encouraged": self.encouraged,
            "invited": self.invited,
            "on_channel": self.on_channel,
            "unique_residences": self.unique_residences,
            "unique_recorders": self.unique_recorders,
            "unique_zones": self.unique_zones,
            "average_age": self.average_age,
        }


def compute_average_age(entries: Sequence[Entry]) -> int:
    """
    Mean of the parseable ages, rounded half up.

    Entries without a parseable age are left out of both the sum and the
    count. Returns 0 when no entry has one.
    """
    ages = [age for age in (parse_age(e.age) for e in entries) if age is not None]
    if not ages:
        return 0
    # Integer arithmetic: ages may exceed float range
    count = len(ages)
    return (2 * sum(ages) + count) // (2 * count)


def compute_windowed_stats(entries: Sequence[Entry]) -> WindowedStats:
    """
    Compute summary statistics for a filtered entry set.

    Distinct counts compare raw strings, so labels that differ only in case
    are counted separately.

    Args:
        entries: Entries already filtered to the reporting window

    Returns:
        WindowedStats (all zeros for an empty set)
    """
    if not entries:
        return WindowedStats()

    categories = count_categories(entries)

    return WindowedStats(
        total_entries=len(entries),
        won=categories[CATEGORY_WON],
        recommitted=categories[CATEGORY_RECOMMITTED],
        encouraged=categories[CATEGORY_ENCOURAGED],
        invited=categories[CATEGORY_INVITED],
        on_channel=sum(1 for e in entries if e.is_on_channel),
        unique_residences=len({e.residence for e in entries}),
        unique_recorders=len({e.recorded_by for e in entries}),
        unique_zones=len({e.zone for e in entries}),
        average_age=compute_average_age(entries),
    )
