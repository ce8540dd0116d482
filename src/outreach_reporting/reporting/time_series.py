"""
Time-series bucketing of windowed entries.

Spans of up to DAILY_GRANULARITY_MAX_SPAN_DAYS days are bucketed per
calendar day, longer spans per calendar month. Monthly series are
gap-filled with zero months; daily series only carry days that have
entries.

Daily labels ("05 Mar") carry no year, so a daily series that crosses a
year boundary has ambiguous labels. bucket_start keeps the full date.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Sequence

import pandas as pd

from ..config.constants import (
    CATEGORY_RECOMMITTED,
    CATEGORY_WON,
    DAILY_GRANULARITY_MAX_SPAN_DAYS,
    MONTH_ABBREVIATIONS,
)
from ..schemas.entries import Entry
from .parsing import parse_occurred_at

logger = logging.getLogger(__name__)


class Granularity(str, Enum):
    """Bucket size of a time series."""

    DAILY = "daily"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Counts for one day or month bucket."""

    label: str
    total: int
    won: int
    recommitted: int
    bucket_start: date

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label,
            "total": self.total,
            "won": self.won,
            "recommitted": self.recommitted,
            "bucket_start": self.bucket_start.isoformat(),
        }


@dataclass
class _BucketCounts:
    total: int = 0
    won: int = 0
    recommitted: int = 0

    def add(self, category: str) -> None:
        self.total += 1
        if category == CATEGORY_WON:
            self.won += 1
        elif category == CATEGORY_RECOMMITTED:
            self.recommitted += 1


def format_month_label(year: int, month: int) -> str:
    """Label a monthly bucket, e.g. "Jan 2024"."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year:04d}"


def format_day_label(day: date) -> str:
    """Label a daily bucket, e.g. "05 Mar"."""
    return f"{day.day:02d} {MONTH_ABBREVIATIONS[day.month - 1]}"


def select_granularity(earliest: datetime, latest: datetime) -> Granularity:
    """
    Choose the bucket size for a date span.

    The span is counted in whole days between the two instants; more than
    DAILY_GRANULARITY_MAX_SPAN_DAYS switches to monthly buckets.
    """
    span_days = (latest - earliest).days
    if span_days > DAILY_GRANULARITY_MAX_SPAN_DAYS:
        return Granularity.MONTHLY
    return Granularity.DAILY


def _parse_dated(entries: Sequence[Entry]) -> list[tuple[datetime, Entry]]:
    dated = []
    for entry in entries:
        occurred = parse_occurred_at(entry.occurred_at)
        if occurred is None:
            # Window filter already drops these; keep the series total safe
            logger.debug(f"Skipping entry {entry.id} with unparseable occurred_at")
            continue
        dated.append((occurred, entry))
    return dated


def _monthly_points(dated: list[tuple[datetime, Entry]]) -> list[TimeSeriesPoint]:
    buckets: dict[tuple[int, int], _BucketCounts] = {}
    for occurred, entry in dated:
        key = (occurred.year, occurred.month)
        buckets.setdefault(key, _BucketCounts()).add(entry.category)

    earliest = min(occurred for occurred, _ in dated)
    latest = max(occurred for occurred, _ in dated)
    months = pd.period_range(
        start=pd.Period(year=earliest.year, month=earliest.month, freq="M"),
        end=pd.Period(year=latest.year, month=latest.month, freq="M"),
        freq="M",
    )

    points = []
    for period in months:
        counts = buckets.get((period.year, period.month), _BucketCounts())
        points.append(
            TimeSeriesPoint(
                label=format_month_label(period.year, period.month),
                total=counts.total,
                won=counts.won,
                recommitted=counts.recommitted,
                bucket_start=date(period.year, period.month, 1),
            )
        )
    return points


def _daily_points(dated: list[tuple[datetime, Entry]]) -> list[TimeSeriesPoint]:
    buckets: dict[date, _BucketCounts] = {}
    for occurred, entry in dated:
        buckets.setdefault(occurred.date(), _BucketCounts()).add(entry.category)

    return [
        TimeSeriesPoint(
            label=format_day_label(day),
            total=counts.total,
            won=counts.won,
            recommitted=counts.recommitted,
            bucket_start=day,
        )
        for day, counts in sorted(buckets.items())
    ]


def build_time_series_with_granularity(
    entries: Sequence[Entry],
) -> tuple[list[TimeSeriesPoint], Optional[Granularity]]:
    """
    Bucket entries over time and report which granularity was used.

    Returns:
        (points ascending by time, granularity or None for an empty series)
    """
    dated = _parse_dated(entries)
    if not dated:
        return [], None

    earliest = min(occurred for occurred, _ in dated)
    latest = max(occurred for occurred, _ in dated)
    granularity = select_granularity(earliest, latest)

    if granularity is Granularity.MONTHLY:
        points = _monthly_points(dated)
    else:
        points = _daily_points(dated)

    logger.debug(
        f"Time series: {len(points)} {granularity.value} buckets "
        f"from {earliest.date()} to {latest.date()}"
    )
    return points, granularity


def build_time_series(entries: Sequence[Entry]) -> list[TimeSeriesPoint]:
    """
    Bucket entries into an ordered daily or monthly series.

    Args:
        entries: Entries already filtered to the reporting window

    Returns:
        TimeSeriesPoint list ascending by time (empty for no entries)
    """
    points, _ = build_time_series_with_granularity(entries)
    return points


def time_series_to_frame(points: Sequence[TimeSeriesPoint]) -> pd.DataFrame:
    """
    Tabulate a series for charting or export.

    Returns:
        DataFrame with label, bucket_start, total, won and recommitted columns
    """
    columns = ["label", "bucket_start", "total", "won", "recommitted"]
    if not points:
        return pd.DataFrame(columns=columns)

    return pd.DataFrame(
        [
            {
                "label": p.label,
                "bucket_start": pd.Timestamp(p.bucket_start),
                "total": p.total,
                "won": p.won,
                "recommitted": p.recommitted,
            }
            for p in points
        ],
        columns=columns,
    )
