"""
Age band distribution.
"""

from dataclasses import dataclass
from typing import Sequence

from ..config.constants import AGE_BANDS
from ..schemas.entries import Entry
from .parsing import parse_age


@dataclass(frozen=True)
class AgeBand:
    label: str
    count: int

    def to_dict(self) -> dict:
        return {"label": self.label, "count": self.count}


def band_for_age(age: int) -> str:
    """Return the label of the band containing age (upper bounds inclusive)."""
    for label, upper in AGE_BANDS:
        if upper is None or age <= upper:
            return label
    return AGE_BANDS[-1][0]


def build_age_bands(entries: Sequence[Entry]) -> list[AgeBand]:
    """
    Count entries per age band.

    Entries without a parseable age are skipped. Every band is returned,
    zeros included, unless there are no entries at all.
    """
    if not entries:
        return []

    counts = {label: 0 for label, _ in AGE_BANDS}
    for entry in entries:
        age = parse_age(entry.age)
        if age is None:
            continue
        counts[band_for_age(age)] += 1

    return [AgeBand(label, count) for label, count in counts.items()]
