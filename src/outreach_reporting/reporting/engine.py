"""
Report engine: one windowed snapshot, every derivation.

The caller owns the entry list and passes it in on each call. Nothing is
cached or mutated between calls, so calling twice with the same snapshot,
window and reference time gives equal reports.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from ..config.settings import ReportingSettings, get_settings
from ..schemas.entries import Entry
from ..storage import EntryStore, get_store
from .age_bands import AgeBand, build_age_bands
from .breakdowns import BreakdownSlice, category_breakdown, channel_breakdown
from .rankings import RankedCount, top_recorders, top_residences, top_zones
from .summary import WindowedStats, compute_windowed_stats
from .time_series import (
    Granularity,
    TimeSeriesPoint,
    build_time_series_with_granularity,
)
from .window import filter_by_window, validate_window_days

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutreachReport:
    """Everything the reporting view renders for one window."""

    window_days: int
    stats: WindowedStats
    category_breakdown: list[BreakdownSlice]
    channel_breakdown: list[BreakdownSlice]
    time_series: list[TimeSeriesPoint]
    granularity: Optional[Granularity]
    top_recorders: list[RankedCount]
    top_residences: list[RankedCount]
    top_zones: list[RankedCount]
    age_bands: list[AgeBand]
    generated_at: datetime = field(default_factory=datetime.now, compare=False)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "window_days": self.window_days,
            "generated_at": self.generated_at.isoformat(),
            "stats": self.stats.to_dict(),
            "category_breakdown": [s.to_dict() for s in self.category_breakdown],
            "channel_breakdown": [s.to_dict() for s in self.channel_breakdown],
            "time_series": [p.to_dict() for p in self.time_series],
            "granularity": self.granularity.value if self.granularity else None,
            "top_recorders": [r.to_dict() for r in self.top_recorders],
            "top_residences": [r.to_dict() for r in self.top_residences],
            "top_zones": [r.to_dict() for r in self.top_zones],
            "age_bands": [b.to_dict() for b in self.age_bands],
        }


def generate_report(
    entries: Iterable[Entry],
    window_days: int,
    settings: Optional[ReportingSettings] = None,
    now: Optional[datetime] = None,
) -> OutreachReport:
    """
    Build the full report for a trailing window.

    Args:
        entries: Entry snapshot supplied by the caller
        window_days: Trailing window in days (any positive integer)
        settings: Ranking limits; defaults to ReportingSettings()
        now: Reference instant for the window (defaults to current time)

    Returns:
        OutreachReport

    Raises:
        InvalidWindowError: If window_days is not a positive integer
    """
    validate_window_days(window_days)
    if settings is None:
        settings = ReportingSettings()
    if now is None:
        now = datetime.now()

    snapshot = tuple(entries)
    windowed = tuple(filter_by_window(snapshot, window_days, now=now))

    stats = compute_windowed_stats(windowed)
    series, granularity = build_time_series_with_granularity(windowed)

    report = OutreachReport(
        window_days=window_days,
        stats=stats,
        category_breakdown=category_breakdown(stats),
        channel_breakdown=channel_breakdown(stats),
        time_series=series,
        granularity=granularity,
        top_recorders=top_recorders(windowed, settings.top_recorders_limit),
        top_residences=top_residences(windowed, settings.top_residences_limit),
        top_zones=top_zones(windowed, settings.top_zones_limit),
        age_bands=build_age_bands(windowed),
        generated_at=now,
    )

    logger.info(
        f"Report for {window_days}d window: {stats.total_entries:,} of "
        f"{len(snapshot):,} entries"
    )
    return report


class ReportQueries:
    """
    Reporting queries backed by an entry store.

    Each query lists a fresh snapshot from the store and hands it to
    generate_report. The store is only read.
    """

    def __init__(
        self,
        store: Optional[EntryStore] = None,
        backend_type: str = "sqlite",
        db_path: Optional[Path] = None,
        settings: Optional[ReportingSettings] = None,
    ):
        """
        Initialize report queries.

        Args:
            store: Pre-initialized EntryStore (optional)
            backend_type: Store type if creating new ('sqlite')
            db_path: Path to SQLite database (for sqlite store)
            settings: Reporting settings (defaults to configured settings)
        """
        if store:
            self._store = store
            self._owns_store = False
        else:
            kwargs = {}
            if backend_type == "sqlite" and db_path:
                kwargs["db_path"] = db_path
            self._store = get_store(backend_type, **kwargs)
            self._owns_store = True

        self._settings = settings or get_settings().reporting
        self._initialized = False

        logger.info(
            f"ReportQueries initialized with {self._store.backend_type} store"
        )

    @property
    def settings(self) -> ReportingSettings:
        return self._settings

    def initialize(self) -> None:
        """Initialize the store."""
        if not self._initialized:
            self._store.initialize()
            self._initialized = True

    def close(self) -> None:
        """Close the store if this object created it."""
        if self._owns_store:
            self._store.close()

    def __enter__(self) -> "ReportQueries":
        """Context manager entry."""
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def get_snapshot(self) -> list[Entry]:
        """List every entry currently in the store."""
        self.initialize()
        return self._store.list_entries()

    def get_report(
        self,
        window_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> OutreachReport:
        """
        Build the report for a window over the current store contents.

        Args:
            window_days: Trailing window in days (defaults to settings)
            now: Reference instant for the window

        Returns:
            OutreachReport
        """
        if window_days is None:
            window_days = self._settings.default_window_days
        return generate_report(
            self.get_snapshot(), window_days, settings=self._settings, now=now
        )
