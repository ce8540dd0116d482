"""
Category and channel breakdowns.

Chart-facing slices omit zero counts; the full tallies (zeros included)
stay on WindowedStats.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from ..config.constants import (
    CATEGORIES,
    CATEGORY_LABELS,
    CHANNEL_LABELS,
    CHANNEL_NO,
    CHANNEL_YES,
)
from ..schemas.entries import Entry

if TYPE_CHECKING:
    from .summary import WindowedStats


@dataclass(frozen=True)
class BreakdownSlice:
    """One labelled slice of a breakdown chart."""

    key: str
    label: str
    count: int

    def to_dict(self) -> dict:
        return {"key": self.key, "label": self.label, "count": self.count}


def count_categories(entries: Iterable[Entry]) -> dict[str, int]:
    """
    Tally entries per outcome category over the fixed vocabulary.

    Categories outside the vocabulary are not counted here.

    Returns:
        Mapping of every vocabulary category to its count (zeros included)
    """
    counts = {category: 0 for category in CATEGORIES}
    for entry in entries:
        if entry.category in counts:
            counts[entry.category] += 1
    return counts


def category_breakdown(stats: "WindowedStats") -> list[BreakdownSlice]:
    """Non-zero category slices in vocabulary order."""
    slices = [
        BreakdownSlice(category, CATEGORY_LABELS[category], count)
        for category, count in stats.category_counts.items()
    ]
    return [s for s in slices if s.count > 0]


def channel_breakdown(stats: "WindowedStats") -> list[BreakdownSlice]:
    """Non-zero reachable / not-reachable slices."""
    slices = [
        BreakdownSlice(CHANNEL_YES, CHANNEL_LABELS[CHANNEL_YES], stats.on_channel),
        BreakdownSlice(
            CHANNEL_NO,
            CHANNEL_LABELS[CHANNEL_NO],
            stats.total_entries - stats.on_channel,
        ),
    ]
    return [s for s in slices if s.count > 0]
