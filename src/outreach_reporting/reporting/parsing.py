"""
Parse-or-omit helpers shared by every report derivation.

A malformed field never raises: the helper returns None and the caller
leaves the entry out of whichever derivation needed that field.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Optional

# Leading integer, the way a form's free-text age field is usually read
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_occurred_at(value: Any) -> Optional[datetime]:
    """
    Parse an entry's event date.

    Accepts ISO-8601 dates ("2024-03-05") and timestamps, including a
    trailing "Z". Timezone-aware values are converted to local time and
    returned naive so they compare with naive local cutoffs.

    Args:
        value: Raw occurred_at value (str, date or datetime)

    Returns:
        Naive local datetime, or None if the value cannot be parsed
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone().replace(tzinfo=None)
        except (OverflowError, ValueError):
            # Local conversion falls outside the datetime range
            return None
    return parsed


def parse_age(value: Any) -> Optional[int]:
    """
    Parse an entry's age as an integer.

    Leading digits are read and anything after them ignored, so "25 years"
    is 25 and "12.7" is 12. Values with no leading integer ("abc", "")
    return None.

    Args:
        value: Raw age value

    Returns:
        Parsed age, or None when the value holds no integer
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)

    match = _LEADING_INT_RE.match(str(value))
    if match is None:
        return None
    return int(match.group(1))
