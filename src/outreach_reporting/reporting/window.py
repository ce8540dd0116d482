"""
Trailing-window filter over an entry snapshot.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..exceptions import InvalidWindowError
from ..schemas.entries import Entry
from .parsing import parse_occurred_at

logger = logging.getLogger(__name__)


def validate_window_days(window_days: object) -> int:
    """
    Check a requested window size.

    Any positive integer is accepted, not only the offered window options.

    Raises:
        InvalidWindowError: If window_days is not a positive int
    """
    if isinstance(window_days, bool) or not isinstance(window_days, int):
        raise InvalidWindowError(window_days)
    if window_days < 1:
        raise InvalidWindowError(window_days)
    return window_days


def compute_cutoff(window_days: int, now: Optional[datetime] = None) -> datetime:
    """Return the earliest instant still inside the window."""
    validate_window_days(window_days)
    if now is None:
        now = datetime.now()
    try:
        return now - timedelta(days=window_days)
    except OverflowError:
        # Window reaches past the earliest representable date
        logger.debug(f"Window {window_days}d exceeds the datetime range")
        return datetime.min


def filter_by_window(
    entries: Iterable[Entry],
    window_days: int,
    now: Optional[datetime] = None,
) -> list[Entry]:
    """
    Keep entries whose occurred_at falls inside the trailing window.

    Entries with an unparseable occurred_at are dropped silently; a single
    malformed record must not stop the report.

    Args:
        entries: Entry snapshot
        window_days: Window size in days (positive integer)
        now: Reference instant (defaults to the current local time)

    Returns:
        Retained entries in input order
    """
    cutoff = compute_cutoff(window_days, now)

    retained = []
    unparseable = 0
    for entry in entries:
        occurred = parse_occurred_at(entry.occurred_at)
        if occurred is None:
            unparseable += 1
            continue
        if occurred >= cutoff:
            retained.append(entry)

    if unparseable:
        logger.debug(f"Excluded {unparseable} entries with unparseable occurred_at")
    logger.debug(
        f"Window {window_days}d (cutoff {cutoff.isoformat()}): "
        f"retained {len(retained)} entries"
    )
    return retained
