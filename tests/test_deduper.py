# tests/test_deduper.py
"""
Unit tests for highlight entry deduplication.
"""

from bias_review.services.influence_map import HighlightDeduper


class TestHighlightDeduper:
    """Tests for the HighlightDeduper service."""

    def test_normalize_phrase(self):
        """Test phrase normalization."""
        deduper = HighlightDeduper()

        assert deduper.normalize_phrase("Historic Betrayal") == "historic betrayal"
        assert deduper.normalize_phrase("UPPERCASE") == "uppercase"

        # Punctuation and spacing are part of the key
        assert deduper.normalize_phrase("U.S. allies") == "u.s. allies"

        # Empty/None handling
        assert deduper.normalize_phrase("") == ""
        assert deduper.normalize_phrase(None) == ""

    def test_case_insensitive_collapse(self, make_entry):
        """Entries differing only in case collapse to the first one."""
        deduper = HighlightDeduper()
        first = make_entry("Historic Betrayal", section="FRAMING")
        second = make_entry("historic betrayal", section="EMOTIONAL TRIGGERS")

        merged = deduper.merge([first, second])

        assert merged == [first]

    def test_earlier_source_wins(self, make_entry):
        """Entries from the first source take priority over later sources."""
        deduper = HighlightDeduper()
        from_bias = [make_entry("radical agenda", section="FRAMING")]
        from_behaviour = [make_entry("Radical Agenda", section="MOTIVATION AND ACTION SIGNALS")]

        merged = deduper.merge(from_bias, from_behaviour)

        assert len(merged) == 1
        assert merged[0].section == "FRAMING"
        assert merged[0].category.label == "FRAMING"

    def test_order_preserved(self, make_entry):
        """Survivors keep their original relative order."""
        deduper = HighlightDeduper()
        entries = [
            make_entry("gamma"),
            make_entry("alpha"),
            make_entry("GAMMA"),
            make_entry("beta"),
            make_entry("Alpha"),
        ]

        merged = deduper.merge(entries)

        assert [e.phrase for e in merged] == ["gamma", "alpha", "beta"]

    def test_duplicates_within_one_source(self, make_entry):
        deduper = HighlightDeduper()

        merged = deduper.merge([make_entry("spin"), make_entry("spin")])

        assert [e.phrase for e in merged] == ["spin"]

    def test_empty_sources(self):
        deduper = HighlightDeduper()

        assert deduper.merge() == []
        assert deduper.merge([], []) == []
