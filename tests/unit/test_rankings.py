"""
Unit tests for Top-N rankings.
"""

import pytest

from outreach_reporting.reporting.rankings import (
    RankedCount,
    rank_by_field,
    top_recorders,
    top_residences,
    top_zones,
)


class TestRankByField:
    """Tests for rank_by_field."""

    def test_descending_by_count(self, make_entry):
        """Labels are ordered by frequency."""
        entries = [
            make_entry(zone="A"),
            make_entry(zone="B"),
            make_entry(zone="B"),
            make_entry(zone="C"),
            make_entry(zone="B"),
            make_entry(zone="C"),
        ]

        assert rank_by_field(entries, "zone", limit=None) == [
            RankedCount("B", 3),
            RankedCount("C", 2),
            RankedCount("A", 1),
        ]

    def test_ties_keep_first_encountered_order(self, make_entry):
        """Equal counts keep scan order, not alphabetical order."""
        entries = [
            make_entry(residence="Tema"),
            make_entry(residence="Adenta"),
            make_entry(residence="Madina"),
            make_entry(residence="Adenta"),
            make_entry(residence="Tema"),
            make_entry(residence="Madina"),
        ]

        ranked = rank_by_field(entries, "residence", limit=None)

        assert [r.label for r in ranked] == ["Tema", "Adenta", "Madina"]

    def test_truncates_to_limit(self, make_entry):
        """Only the first `limit` rows are returned."""
        entries = [make_entry(zone=f"Zone {i}") for i in range(10)]

        assert len(rank_by_field(entries, "zone", limit=6)) == 6

    def test_invalid_field_rejected(self, make_entry):
        """Only rankable fields are accepted."""
        with pytest.raises(ValueError):
            rank_by_field([make_entry()], "phone_number", limit=5)

    def test_empty_input(self):
        """No entries gives an empty ranking."""
        assert rank_by_field([], "zone", limit=6) == []

    def test_unknown_labels_counted_literally(self, make_entry):
        """Uncurated zone values are ranked under their literal label."""
        ranked = rank_by_field([make_entry(zone="???")], "zone", limit=6)

        assert ranked == [RankedCount("???", 1)]


class TestTopRecorders:
    """Tests for the recorder ranking."""

    def test_only_won_and_recommitted_count(self, make_entry):
        """Encouraged and invited entries do not credit the recorder."""
        entries = [
            make_entry(recorded_by="Ama", category="won"),
            make_entry(recorded_by="Kofi", category="encouraged"),
            make_entry(recorded_by="Kofi", category="invited"),
            make_entry(recorded_by="Esi", category="recommitted"),
            make_entry(recorded_by="Ama", category="recommitted"),
        ]

        assert top_recorders(entries) == [
            RankedCount("Ama", 2),
            RankedCount("Esi", 1),
        ]

    def test_default_limit_is_ten(self, make_entry):
        """The recorder ranking shows ten rows by default."""
        entries = [make_entry(recorded_by=f"R{i}", category="won") for i in range(15)]

        assert len(top_recorders(entries)) == 10

    def test_limit_is_configurable(self, make_entry):
        """A custom limit overrides the default."""
        entries = [make_entry(recorded_by=f"R{i}", category="won") for i in range(15)]

        assert len(top_recorders(entries, limit=3)) == 3


class TestLocationRankings:
    """Tests for residence and zone rankings."""

    def test_encouraged_counts_for_residence_and_zone(self, make_entry):
        """Every category contributes to location rankings."""
        entry = make_entry(category="encouraged", residence="Osu", zone="Zone C")

        assert top_residences([entry]) == [RankedCount("Osu", 1)]
        assert top_zones([entry]) == [RankedCount("Zone C", 1)]
        assert top_recorders([entry]) == []

    def test_default_limits_are_six(self, make_entry):
        """Residence and zone rankings show six rows by default."""
        entries = [make_entry(residence=f"R{i}", zone=f"Z{i}") for i in range(9)]

        assert len(top_residences(entries)) == 6
        assert len(top_zones(entries)) == 6

    def test_limits_are_independent(self, make_entry):
        """Each ranking honours its own limit."""
        entries = [make_entry(residence=f"R{i}", zone=f"Z{i}") for i in range(9)]

        assert len(top_residences(entries, limit=8)) == 8
        assert len(top_zones(entries, limit=2)) == 2
