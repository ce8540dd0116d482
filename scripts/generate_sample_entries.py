#!/usr/bin/env python3
"""
Generate sample outreach entries for trying out the reports.

Usage:
    # Print a summary of 200 entries spread over the last 120 days
    python scripts/generate_sample_entries.py --count 200 --days 120

    # Insert directly into SQLite database
    python scripts/generate_sample_entries.py --output sqlite --db-path data/test.db

    # Output as JSON for inspection
    python scripts/generate_sample_entries.py --output json --count 20
"""

import argparse
import json
import logging
import random
import sys
from collections import Counter
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from outreach_reporting.config.constants import CATEGORIES
from outreach_reporting.logging_utils import setup_logging
from outreach_reporting.storage import StorageError, get_store

logger = logging.getLogger(__name__)


RECORDERS = ["Ama Mensah", "Kofi Boateng", "Esi Owusu", "Yaw Darko", "Akua Asante"]
ZONES = ["Zone A", "Zone B", "Zone C", "Zone D"]
RESIDENCES = ["Adenta", "Madina", "Legon", "Osu", "Tema", "Kasoa", "Dansoman"]
FIRST_NAMES = ["Kwame", "Abena", "Kojo", "Adwoa", "Kwesi", "Efua", "Kobby", "Afia"]
LAST_NAMES = ["Appiah", "Ofori", "Addo", "Quaye", "Lamptey", "Nkrumah"]

# Relative frequency of each outcome category
CATEGORY_WEIGHTS = [0.35, 0.25, 0.25, 0.15]


def generate_entry_fields(rng: random.Random, start: date, days: int) -> dict:
    """Generate the fields of one entry (the store assigns id/created_at)."""
    occurred = start + timedelta(days=rng.randint(0, max(days - 1, 0)))

    # Occasionally leave age blank or non-numeric, as the form allows
    roll = rng.random()
    if roll < 0.1:
        age: Optional[str] = None
    elif roll < 0.15:
        age = "unknown"
    else:
        age = str(rng.randint(8, 75))

    return {
        "recorded_by": rng.choice(RECORDERS),
        "zone": rng.choice(ZONES),
        "occurred_at": occurred.isoformat(),
        "category": rng.choices(CATEGORIES, weights=CATEGORY_WEIGHTS)[0],
        "subject_name": f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        "age": age,
        "residence": rng.choice(RESIDENCES),
        "phone_number": "0" + "".join(str(rng.randint(0, 9)) for _ in range(9)),
        "on_channel": rng.choice(["yes", "no"]),
    }


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate sample outreach entries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--count",
        type=int,
        default=100,
        help="Number of entries to generate (default: 100)",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=90,
        help="Spread entries over this many days up to today (default: 90)",
    )
    parser.add_argument(
        "--output",
        choices=["stats", "json", "sqlite"],
        default="stats",
        help="Output format (default: stats)",
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        help="SQLite database path (default: from settings)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.count < 1:
        logger.error(f"--count must be >= 1, got {args.count}")
        return 1
    if args.days < 1:
        logger.error(f"--days must be >= 1, got {args.days}")
        return 1

    rng = random.Random(args.seed)
    start = date.today() - timedelta(days=args.days - 1)
    records = [generate_entry_fields(rng, start, args.days) for _ in range(args.count)]

    if args.output == "json":
        print(json.dumps(records, indent=2))
        return 0

    if args.output == "stats":
        categories = Counter(r["category"] for r in records)
        print(f"Generated {len(records):,} entries from {start} to {date.today()}")
        for category in CATEGORIES:
            print(f"  {category:<12} {categories[category]:,}")
        return 0

    kwargs = {}
    if args.db_path:
        kwargs["db_path"] = args.db_path

    try:
        with get_store("sqlite", **kwargs) as store:
            store.initialize()
            for record in records:
                store.create_entry(record)
            logger.info(f"Inserted {len(records):,} entries")
    except StorageError as e:
        logger.error(f"Failed to insert entries: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
