#!/usr/bin/env python3
"""
CLI script to build the outreach report for a trailing window.

Usage:
    # Last 30 days (default window from settings)
    python scripts/run_report.py

    # Specific window and database
    python scripts/run_report.py --window 90 --db-path data/entries.db

    # Output as JSON
    python scripts/run_report.py --window 3650 --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from outreach_reporting.config import WINDOW_OPTIONS, get_settings
from outreach_reporting.config.constants import WINDOW_LABELS
from outreach_reporting.exceptions import InvalidWindowError
from outreach_reporting.logging_utils import setup_logging
from outreach_reporting.reporting import ReportQueries
from outreach_reporting.storage import StorageError, get_store


def positive_int(value: str) -> int:
    """Parse a positive integer window size."""
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid window: {value}. Use whole days")
    if days < 1:
        raise argparse.ArgumentTypeError(f"Window must be >= 1 day, got {days}")
    return days


def print_report(report) -> None:
    """Print a human-readable report."""
    stats = report.stats
    label = WINDOW_LABELS.get(report.window_days, f"Last {report.window_days} days")

    print()
    print(f"📊 Outreach Report ({label})")
    print("=" * 50)
    print(f"  People reached:     {stats.total_entries:,}")
    print(f"  Won:                {stats.won:,}")
    print(f"  Recommitted:        {stats.recommitted:,}")
    print(f"  Encouraged:         {stats.encouraged:,}")
    print(f"  Invited:            {stats.invited:,}")
    print(f"  On channel:         {stats.on_channel:,}")
    print(f"  Unique residences:  {stats.unique_residences:,}")
    print(f"  Unique recorders:   {stats.unique_recorders:,}")
    print(f"  Unique zones:       {stats.unique_zones:,}")
    print(f"  Average age:        {stats.average_age}")

    granularity = report.granularity.value if report.granularity else "none"
    print(f"\n📈 Trend ({granularity})")
    print("-" * 40)
    for point in report.time_series:
        print(
            f"  {point.label:>10}  total={point.total:<4} won={point.won:<4} "
            f"recommitted={point.recommitted}"
        )

    sections = [
        ("🏆 Top recorders", report.top_recorders),
        ("📍 Top residences", report.top_residences),
        ("🗺  Top zones", report.top_zones),
        ("🎂 Age bands", report.age_bands),
    ]
    for title, rows in sections:
        print(f"\n{title}")
        print("-" * 40)
        for row in rows:
            print(f"  {row.label:<25} {row.count:,}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Build the outreach report for a trailing window",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Common windows: {', '.join(str(w) for w in WINDOW_OPTIONS)} days

Examples:
  python scripts/run_report.py --window 7
  python scripts/run_report.py --window 365 --json
        """,
    )

    parser.add_argument(
        "--db-path",
        type=Path,
        help="Path to SQLite database (default: from settings)",
    )
    parser.add_argument(
        "--window",
        type=positive_int,
        help="Trailing window in days (default: from settings)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger(__name__)

    settings = get_settings()
    errors = settings.validate()
    if errors:
        for error in errors:
            logger.error(f"Invalid settings: {error}")
        return 1

    kwargs = {}
    if args.db_path:
        kwargs["db_path"] = args.db_path

    try:
        store = get_store("sqlite", **kwargs)
        store.initialize()
    except StorageError as e:
        logger.error(f"Could not open entry store: {e}")
        return 1

    try:
        queries = ReportQueries(store=store, settings=settings.reporting)
        report = queries.get_report(window_days=args.window)
    except (StorageError, InvalidWindowError) as e:
        logger.error(f"Report failed: {e}")
        return 1
    finally:
        store.close()

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, default=str))
    else:
        print_report(report)

    return 0


if __name__ == "__main__":
    sys.exit(main())
