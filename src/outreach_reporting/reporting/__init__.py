"""Reporting and analytics module."""

from .admin import (
    OverallTotals,
    Page,
    compute_overall_totals,
    paginate,
    search_entries,
)
from .age_bands import AgeBand, build_age_bands
from .breakdowns import (
    BreakdownSlice,
    category_breakdown,
    channel_breakdown,
    count_categories,
)
from .engine import OutreachReport, ReportQueries, generate_report
from .parsing import parse_age, parse_occurred_at
from .rankings import (
    RankedCount,
    rank_by_field,
    top_recorders,
    top_residences,
    top_zones,
)
from .summary import WindowedStats, compute_windowed_stats
from .time_series import (
    Granularity,
    TimeSeriesPoint,
    build_time_series,
    select_granularity,
    time_series_to_frame,
)
from .window import compute_cutoff, filter_by_window

__all__ = [
    # Engine
    "generate_report",
    "OutreachReport",
    "ReportQueries",
    # Parse-or-omit helpers
    "parse_occurred_at",
    "parse_age",
    # Window filter
    "filter_by_window",
    "compute_cutoff",
    # Summary
    "WindowedStats",
    "compute_windowed_stats",
    # Breakdowns
    "BreakdownSlice",
    "count_categories",
    "category_breakdown",
    "channel_breakdown",
    # Time series
    "Granularity",
    "TimeSeriesPoint",
    "build_time_series",
    "select_granularity",
    "time_series_to_frame",
    # Rankings
    "RankedCount",
    "rank_by_field",
    "top_recorders",
    "top_residences",
    "top_zones",
    # Age bands
    "AgeBand",
    "build_age_bands",
    # Admin list
    "search_entries",
    "paginate",
    "compute_overall_totals",
    "Page",
    "OverallTotals",
]
