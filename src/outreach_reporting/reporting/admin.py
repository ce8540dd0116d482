"""
Derivations for the admin entry list: search, pagination and
whole-snapshot totals.
"""

import math
from dataclasses import dataclass, field
from typing import Sequence

from ..config.constants import CATEGORY_RECOMMITTED, CATEGORY_WON
from ..schemas.entries import Entry

DEFAULT_PAGE_SIZE = 10

SEARCHABLE_FIELDS = (
    "recorded_by",
    "subject_name",
    "residence",
    "zone",
    "category",
    "phone_number",
)


@dataclass(frozen=True)
class Page:
    """One page of an entry list."""

    items: list[Entry] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    total_items: int = 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class OverallTotals:
    """Headline counts across the whole snapshot, ignoring any window."""

    total_entries: int = 0
    won: int = 0
    recommitted: int = 0


def search_entries(entries: Sequence[Entry], term: str) -> list[Entry]:
    """
    Case-insensitive substring search across the listed text fields.

    An empty or blank term returns every entry, in order.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(entries)

    matches = []
    for entry in entries:
        for name in SEARCHABLE_FIELDS:
            value = getattr(entry, name)
            if value and needle in value.lower():
                matches.append(entry)
                break
    return matches


def paginate(
    entries: Sequence[Entry], page: int = 1, per_page: int = DEFAULT_PAGE_SIZE
) -> Page:
    """
    Slice entries into a page.

    The page number is clamped into range; an empty list is one empty page.
    """
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")

    total_items = len(entries)
    total_pages = max(1, math.ceil(total_items / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page

    return Page(
        items=list(entries[start : start + per_page]),
        page=page,
        total_pages=total_pages,
        total_items=total_items,
    )


def compute_overall_totals(entries: Sequence[Entry]) -> OverallTotals:
    """Count all, won and recommitted entries over the unfiltered snapshot."""
    return OverallTotals(
        total_entries=len(entries),
        won=sum(1 for e in entries if e.category == CATEGORY_WON),
        recommitted=sum(1 for e in entries if e.category == CATEGORY_RECOMMITTED),
    )
