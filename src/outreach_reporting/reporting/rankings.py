"""
Top-N rankings over windowed entries.

Ties keep the order in which labels were first seen while scanning the
entries; there is no secondary alphabetic sort.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..config.constants import (
    SUCCESS_CATEGORIES,
    TOP_RECORDERS_LIMIT,
    TOP_RESIDENCES_LIMIT,
    TOP_ZONES_LIMIT,
)
from ..schemas.entries import Entry

RANKABLE_FIELDS = frozenset(["recorded_by", "residence", "zone"])


@dataclass(frozen=True)
class RankedCount:
    """A label and how many entries it accounts for."""

    label: str
    count: int

    def to_dict(self) -> dict:
        return {"label": self.label, "count": self.count}


def rank_by_field(
    entries: Sequence[Entry],
    field: str,
    limit: Optional[int],
    include: Optional[Callable[[Entry], bool]] = None,
) -> list[RankedCount]:
    """
    Rank the raw values of an entry field by frequency.

    Args:
        entries: Entries to tally
        field: Entry attribute to group by (recorded_by, residence, zone)
        limit: Maximum rows to return, None for all
        include: Optional predicate; entries it rejects are not counted

    Returns:
        RankedCount list, descending by count
    """
    if field not in RANKABLE_FIELDS:
        raise ValueError(
            f"Invalid ranking field: '{field}'. Must be one of: "
            f"{sorted(RANKABLE_FIELDS)}"
        )

    # Counter keeps first-insertion order and most_common sorts stably
    counts = Counter(
        getattr(entry, field)
        for entry in entries
        if include is None or include(entry)
    )
    return [RankedCount(label, count) for label, count in counts.most_common(limit)]


def _is_success(entry: Entry) -> bool:
    return entry.category in SUCCESS_CATEGORIES


def top_recorders(
    entries: Sequence[Entry], limit: Optional[int] = TOP_RECORDERS_LIMIT
) -> list[RankedCount]:
    """Recorders ranked by won and recommitted entries only."""
    return rank_by_field(entries, "recorded_by", limit, include=_is_success)


def top_residences(
    entries: Sequence[Entry], limit: Optional[int] = TOP_RESIDENCES_LIMIT
) -> list[RankedCount]:
    """Residences ranked by all entries."""
    return rank_by_field(entries, "residence", limit)


def top_zones(
    entries: Sequence[Entry], limit: Optional[int] = TOP_ZONES_LIMIT
) -> list[RankedCount]:
    """Zones ranked by all entries."""
    return rank_by_field(entries, "zone", limit)
